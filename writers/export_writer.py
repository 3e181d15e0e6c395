"""
CSV / JSON export of the reconciled material table.

Both writers are pure and deterministic: the same rows always give the same
string, byte for byte, so downstream ERP integration can diff exports.

JSON: a list of objects with a fixed key order, `delta_percent` left out
(display-only), 2-space indentation.
CSV: every field double-quoted, `;`-separated, lines joined by `\n` with no
trailing newline, `Delta (%)` with exactly two decimals.

Quantities are written raw (no grouping, no locale); integral floats are
written as integers.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import pandas as pd

from config import (
    CSV_DELIMITER,
    CSV_HEADERS,
    CSV_MIME_TYPE,
    EXPORT_CSV_FILENAME,
    EXPORT_JSON_FILENAME,
    JSON_INDENT,
    JSON_MIME_TYPE,
)
from domain.material import DerivedRow
from fields.normalization import canonical_number, format_quantity

logger = logging.getLogger(__name__)

# Row key -> JSON key, in output order.
JSON_FIELDS = (
    ("id", "id"),
    ("description", "description"),
    ("unit_of_measure", "unitOfMeasure"),
    ("planned", "planned"),
    ("assigned", "assigned"),
    ("issued", "issued"),
    ("total", "total"),
    ("retour", "retour"),
    ("consomme", "consomme"),
)


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    mime_type: str
    content: str

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


def _json_value(value: Any) -> Any:
    if isinstance(value, (int, float)):
        return canonical_number(value)
    return value


def _row_to_json(row: DerivedRow) -> Dict[str, Any]:
    return {json_key: _json_value(row.get(key)) for key, json_key in JSON_FIELDS}


def to_json(rows: Iterable[DerivedRow]) -> str:
    """Serialize derived rows as a pretty-printed JSON array (no delta_percent)."""
    payload: List[Dict[str, Any]] = [_row_to_json(row) for row in rows]
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


def _row_to_csv_cells(row: DerivedRow) -> List[str]:
    return [
        str(row.get("id", "")),
        str(row.get("description", "")),
        str(row.get("unit_of_measure", "")),
        format_quantity(row.get("planned", 0)),
        format_quantity(row.get("assigned", 0)),
        format_quantity(row.get("issued", 0)),
        format_quantity(row.get("total", 0)),
        format_quantity(row.get("retour", 0)),
        format_quantity(row.get("consomme", 0)),
        f"{row.get('delta_percent', 0.0):.2f}",
    ]


def to_csv(rows: Iterable[DerivedRow]) -> str:
    """Serialize derived rows as a quoted, semicolon-separated CSV document."""
    df = pd.DataFrame([_row_to_csv_cells(row) for row in rows], columns=CSV_HEADERS, dtype=str)

    text = df.to_csv(
        index=False,
        sep=CSV_DELIMITER,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    # pandas terminates the last line too; the document ends on the last field.
    if text.endswith("\n"):
        text = text[:-1]
    return text


def json_artifact(rows: Iterable[DerivedRow]) -> ExportArtifact:
    rows = list(rows)
    logger.debug("Built %s from %d material rows", EXPORT_JSON_FILENAME, len(rows))
    return ExportArtifact(EXPORT_JSON_FILENAME, JSON_MIME_TYPE, to_json(rows))


def csv_artifact(rows: Iterable[DerivedRow]) -> ExportArtifact:
    rows = list(rows)
    logger.debug("Built %s from %d material rows", EXPORT_CSV_FILENAME, len(rows))
    return ExportArtifact(EXPORT_CSV_FILENAME, CSV_MIME_TYPE, to_csv(rows))
