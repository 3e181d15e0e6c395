"""
JSON EXPORT READER
------------------
Reads a previously exported `conso-retour.json` back into MaterialRecords,
so an operator can resume a reconciliation from their last export.

`consomme` is ignored (it is always re-derived). Quantities go through the
same non-negative coercion as operator input.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from domain.material import MaterialRecord
from fields.normalization import coerce_non_negative_number

logger = logging.getLogger(__name__)


class ExportFormatError(ValueError):
    """Raised when a document is not a conso/retour JSON export."""
    pass


def _record_from_item(item: Dict[str, Any], position: int) -> MaterialRecord:
    material_id = item.get("id")
    if material_id is None or str(material_id).strip() == "":
        raise ExportFormatError(f"Row {position}: missing material id")

    return MaterialRecord(
        id=str(material_id),
        description=str(item.get("description") or ""),
        unit_of_measure=str(item.get("unitOfMeasure") or ""),
        planned=coerce_non_negative_number(item.get("planned")),
        assigned=coerce_non_negative_number(item.get("assigned")),
        issued=coerce_non_negative_number(item.get("issued")),
        total=coerce_non_negative_number(item.get("total")),
        retour=coerce_non_negative_number(item.get("retour")),
    )


def read_export_json(text: str) -> List[MaterialRecord]:
    """
    Parse the content of a JSON export.

    Args:
        text: Document produced by `writers.to_json`

    Returns:
        MaterialRecords in document order

    Raises:
        ExportFormatError: If the document is not valid JSON, not a list of
            objects, or contains duplicate/missing material ids
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ExportFormatError(f"Not a valid JSON document (position {e.pos}: {e.msg})") from e

    if not isinstance(raw, list):
        raise ExportFormatError("Expected a JSON array of material rows")

    records: List[MaterialRecord] = []
    seen: set[str] = set()
    for position, item in enumerate(raw, start=1):
        if not isinstance(item, dict):
            raise ExportFormatError(f"Row {position}: expected an object, got {type(item).__name__}")

        record = _record_from_item(item, position)
        if record["id"] in seen:
            raise ExportFormatError(f"Row {position}: duplicate material id {record['id']}")
        seen.add(record["id"])
        records.append(record)

    logger.info("Loaded %d material rows from JSON export", len(records))
    return records


def read_export_json_file(json_path: Path) -> List[MaterialRecord]:
    """Read a JSON export from disk (UTF-8)."""
    json_path = json_path.expanduser().resolve()
    if not json_path.exists():
        raise FileNotFoundError(f"Export file not found: {json_path}")

    return read_export_json(json_path.read_text(encoding="utf-8"))
