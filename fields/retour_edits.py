"""
Operator edits on the `retour` column.

Both entry points take the current material list and return the list to keep:
- unknown ids (and unknown quick-set modes) return the input list itself;
- otherwise a new list where only the edited record is a new dict and every
  other record is the same object as before.

Nothing here raises on bad input.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from domain.material import MaterialRecord

from .normalization import coerce_non_negative_number, round_half_up

logger = logging.getLogger(__name__)


class QuickSetMode(str, Enum):
    ZERO = "zero"
    HALF = "half"
    ASSIGNED = "assigned"


def _find_record(records: List[MaterialRecord], material_id: str) -> Optional[MaterialRecord]:
    for record in records:
        if record.get("id") == material_id:
            return record
    return None


def set_retour(records: List[MaterialRecord], material_id: str, raw_value) -> List[MaterialRecord]:
    """Store `raw_value` (coerced to a non-negative number) as the retour of `material_id`."""
    if _find_record(records, material_id) is None:
        logger.debug("Ignoring retour edit for unknown material %r", material_id)
        return records

    retour = coerce_non_negative_number(raw_value)
    logger.debug("Retour for %s set to %s (raw input %r)", material_id, retour, raw_value)

    return [
        {**record, "retour": retour} if record.get("id") == material_id else record
        for record in records
    ]


def quick_set(records: List[MaterialRecord], material_id: str, mode) -> List[MaterialRecord]:
    """
    Shortcut edits: "zero" -> 0, "half" -> assigned / 2 rounded half up, "assigned" -> assigned.
    """
    record = _find_record(records, material_id)
    if record is None:
        logger.debug("Ignoring quick-set for unknown material %r", material_id)
        return records

    try:
        mode = QuickSetMode(mode)
    except ValueError:
        logger.debug("Ignoring unknown quick-set mode %r for %s", mode, material_id)
        return records

    assigned = coerce_non_negative_number(record.get("assigned"))
    if mode is QuickSetMode.ZERO:
        value = 0.0
    elif mode is QuickSetMode.HALF:
        value = round_half_up(assigned / 2)
    else:
        value = assigned

    return set_retour(records, material_id, value)
