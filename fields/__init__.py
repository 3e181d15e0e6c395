from .consumption_math import (
    compute_consomme,
    delta_within_tolerance,
    derive_all,
    derive_row,
    percent_deviation,
)
from .normalization import (
    canonical_number,
    coerce_non_negative_number,
    format_quantity,
    round_half_up,
    to_number,
)
from .retour_edits import QuickSetMode, quick_set, set_retour

__all__ = [
    "compute_consomme",
    "delta_within_tolerance",
    "derive_all",
    "derive_row",
    "percent_deviation",
    "canonical_number",
    "coerce_non_negative_number",
    "format_quantity",
    "round_half_up",
    "to_number",
    "QuickSetMode",
    "quick_set",
    "set_retour",
]
