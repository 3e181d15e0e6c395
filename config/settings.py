"""
Central configuration for exports, display rules and logging.

This module defines:
- Export file names, MIME types and the fixed CSV layout (headers, delimiter).
- The delta tolerance used by the operator view to colour the Δ badge.
- Logging level/format, overridable through the environment (or a `.env` file).
- Upload limits for the import panel.

All values are constants and should be imported where needed (no runtime logic here).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


EXPORT_JSON_FILENAME = "conso-retour.json"
EXPORT_CSV_FILENAME = "conso-retour.csv"

JSON_MIME_TYPE = "application/json"
CSV_MIME_TYPE = "text/csv;charset=utf-8;"

JSON_INDENT = 2

CSV_DELIMITER = ";"
CSV_HEADERS = [
    "Material",
    "Description",
    "UoM",
    "Planned",
    "Assigned",
    "Issued",
    "Total",
    "Retour",
    "Consomme",
    "Delta (%)",
]

DELTA_TOLERANCE_PCT = 2.0

MAX_UPLOAD_SIZE_MB = 5

LOG_LEVEL = os.getenv("CONSO_RETOUR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"
LOG_FILE = os.getenv("CONSO_RETOUR_LOG_FILE") or None
