from .logging_config import configure_logging
from .settings import (
    CSV_DELIMITER,
    CSV_HEADERS,
    CSV_MIME_TYPE,
    DELTA_TOLERANCE_PCT,
    EXPORT_CSV_FILENAME,
    EXPORT_JSON_FILENAME,
    JSON_INDENT,
    JSON_MIME_TYPE,
    MAX_UPLOAD_SIZE_MB,
)

__all__ = [
    "configure_logging",
    "CSV_DELIMITER",
    "CSV_HEADERS",
    "CSV_MIME_TYPE",
    "DELTA_TOLERANCE_PCT",
    "EXPORT_CSV_FILENAME",
    "EXPORT_JSON_FILENAME",
    "JSON_INDENT",
    "JSON_MIME_TYPE",
    "MAX_UPLOAD_SIZE_MB",
]
