"""
Numeric normalization for operator input and export values.

Operator-entered quantities are untrusted: they may arrive as strings from a
form field, as None, or as junk. Nothing here raises; unusable input falls back
to a documented default instead.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float]


def to_number(value) -> Optional[float]:
    """
    Convert int/float (or numeric-like strings) to float.

    Strings are stripped and accept a decimal comma ("12,5" -> 12.5).
    Returns None for None, booleans, blank/unparsable strings, NaN, infinities
    and ints too large for a float.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            v = float(value)
        except OverflowError:
            return None
    else:
        s = str(value).strip()
        if not s:
            return None
        s = s.replace(",", ".")
        try:
            v = float(s)
        except ValueError:
            return None

    if not math.isfinite(v):
        return None
    return v


def coerce_non_negative_number(value) -> float:
    """
    Coerce untrusted input into a non-negative float.

    Anything `to_number` cannot read becomes 0, and negatives are clamped to 0.
    This is a silent clamp: callers never get an error for bad input.
    """
    v = to_number(value)
    if v is None:
        return 0.0
    return max(0.0, v)


def round_half_up(value: Number) -> float:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, 1080.5 -> 1081)."""
    d = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(d)


def canonical_number(value: Number) -> Number:
    """Return integral floats as int (60.0 -> 60) so exports never depend on int/float input types."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_quantity(value: Number) -> str:
    """Plain machine-readable rendering of a quantity: no grouping, no locale, no exponent ("2060", "12.5", "0.00001")."""
    value = canonical_number(value)
    if isinstance(value, float) and math.isfinite(value):
        return format(Decimal(repr(value)), "f")
    return str(value)
