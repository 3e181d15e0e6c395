"""
Screen-only number formatting (fr-FR convention).

Never used by the export writers: exported values stay machine-readable.
"""

from __future__ import annotations

from fields.normalization import Number, round_half_up, to_number

THOUSANDS_SEP = "\u202f"  # narrow no-break space, as in fr-FR


def fmt_quantity(value: Number) -> str:
    """Format a quantity with zero decimals and fr-FR thousands grouping (16530 -> '16 530')."""
    v = to_number(value)
    if v is None:
        return "—"
    rounded = int(round_half_up(abs(v)))
    text = f"{rounded:,}".replace(",", THOUSANDS_SEP)
    return f"-{text}" if v < 0 and rounded else text


def fmt_quantity_with_unit(value: Number, unit: str) -> str:
    return f"{fmt_quantity(value)} {unit}".strip()


def fmt_delta(delta_percent: float) -> str:
    return f"{delta_percent:.2f}%"
