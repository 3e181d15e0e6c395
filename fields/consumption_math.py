"""
Consumption and deviation computations for the end-of-PO reconciliation.

For every material line:
- consomme = assigned - retour, never below 0 (retour may exceed assigned)
- delta_percent = deviation of consomme from assigned, in percent;
  0 when assigned is 0

Totals are always folded from the freshly derived rows, never accumulated
across edits. All arithmetic is done in floating point.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from config import DELTA_TOLERANCE_PCT
from domain.material import TOTAL_FIELDS, DerivedRow, MaterialRecord, Totals, empty_totals

from .normalization import Number, coerce_non_negative_number


def percent_deviation(value: Number, reference: Number) -> float:
    """Percentage deviation of `value` from `reference`; 0 when the reference is 0."""
    if not reference:
        return 0.0
    return ((value - reference) / reference) * 100


def compute_consomme(assigned: Number, retour: Number) -> float:
    """Consumed quantity = assigned - retour, clamped at 0."""
    return max(0.0, float(assigned) - float(retour))


def derive_row(record: MaterialRecord) -> DerivedRow:
    """Return a new DerivedRow for `record` (the record itself is not modified)."""
    retour = coerce_non_negative_number(record.get("retour"))
    assigned = float(record.get("assigned") or 0)
    consomme = compute_consomme(assigned, retour)

    row = DerivedRow(**record)
    row["retour"] = retour
    row["consomme"] = consomme
    row["delta_percent"] = percent_deviation(consomme, assigned)
    return row


def derive_all(records: Iterable[MaterialRecord]) -> Tuple[List[DerivedRow], Totals]:
    """
    Derive every record in input order and fold the totals in the same pass.

    Order matters: it is kept through display and both exports.
    """
    rows: List[DerivedRow] = []
    totals = empty_totals()

    for record in records:
        row = derive_row(record)
        rows.append(row)
        for k in TOTAL_FIELDS:
            totals[k] += float(row.get(k) or 0)

    return rows, totals


def delta_within_tolerance(delta_percent: float, tolerance: float = DELTA_TOLERANCE_PCT) -> bool:
    """True when |delta| is within the display tolerance (green badge)."""
    return abs(delta_percent) <= tolerance
