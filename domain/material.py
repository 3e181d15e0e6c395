"""
Material row schemas for the end-of-PO reconciliation.

These TypedDicts represent the structures passed between the calculator,
the export writers and the Streamlit view:

- MaterialRecord: one PO material line as seeded/imported. Only `retour`
  is ever changed by the operator.
- DerivedRow: a MaterialRecord plus the computed `consomme` and `delta_percent`.
- Totals: column sums over the derived rows.

Quantities are plain numbers (int or float). Derived rows and totals are
recomputed on every read and are never the source of truth.
"""

from __future__ import annotations

from typing import TypedDict, Union

Number = Union[int, float]

TOTAL_FIELDS = ("planned", "assigned", "issued", "total", "retour", "consomme")


class MaterialRecord(TypedDict):
    id: str
    description: str
    unit_of_measure: str

    planned: Number
    assigned: Number
    issued: Number
    total: Number

    retour: Number


class DerivedRow(MaterialRecord):
    consomme: float
    delta_percent: float


class Totals(TypedDict):
    planned: float
    assigned: float
    issued: float
    total: float
    retour: float
    consomme: float


class POHeader(TypedDict):
    po_number: str
    product: str
    batch: str


def empty_totals() -> Totals:
    """Return a Totals mapping with every column at zero."""
    return Totals(planned=0.0, assigned=0.0, issued=0.0, total=0.0, retour=0.0, consomme=0.0)
