"""
Logging setup for the operator screen.

`configure_logging()` is called once by the Streamlit entry point. Streamlit
re-executes the script on every interaction, so the call is guarded to apply
the dictConfig only the first time.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from .settings import LOG_FILE, LOG_FORMAT, LOG_LEVEL

_configured = False


def build_logging_config(level: str = LOG_LEVEL, log_file: str | None = LOG_FILE) -> Dict[str, Any]:
    """Return the dictConfig mapping (console always, rotating file when `log_file` is set)."""
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": log_file,
            "maxBytes": 1024 * 1024 * 5,  # 5 MB
            "backupCount": 5,
            "level": level,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": level,
        },
    }


def configure_logging(level: str = LOG_LEVEL, log_file: str | None = LOG_FILE) -> None:
    """Apply the logging configuration once per process."""
    global _configured
    if _configured:
        return
    logging.config.dictConfig(build_logging_config(level, log_file))
    _configured = True
