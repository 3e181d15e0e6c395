from .material import DerivedRow, MaterialRecord, POHeader, Totals, empty_totals
from .seed import PO_HEADER, initial_materials

__all__ = [
    "DerivedRow",
    "MaterialRecord",
    "POHeader",
    "Totals",
    "empty_totals",
    "PO_HEADER",
    "initial_materials",
]
