"""
Session seed data.

Until the SAP TXT import exists, every operator session starts from this
fixed PO and its three material lines.
"""

from __future__ import annotations

import copy
from typing import List

from .material import MaterialRecord, POHeader

PO_HEADER = POHeader(po_number="1048956", product="FRAXIPARINE 0.6 ML", batch="8564")

_INITIAL_MATERIALS: List[MaterialRecord] = [
    MaterialRecord(
        id="000123451",
        description="CARTON SECONDARY 1",
        unit_of_measure="EA",
        planned=16530,
        assigned=2160,
        issued=100,
        total=2060,
        retour=100,
    ),
    MaterialRecord(
        id="000123452",
        description="ETIQUETTES PRIMAIRES",
        unit_of_measure="EA",
        planned=10000,
        assigned=9800,
        issued=0,
        total=9800,
        retour=0,
    ),
    MaterialRecord(
        id="000123453",
        description="BOUTEILLES VERRE 0.6",
        unit_of_measure="EA",
        planned=16530,
        assigned=16200,
        issued=0,
        total=16200,
        retour=0,
    ),
]


def initial_materials() -> List[MaterialRecord]:
    """Return a fresh copy of the seed materials for a new session."""
    return copy.deepcopy(_INITIAL_MATERIALS)
