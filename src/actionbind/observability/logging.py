"""Structured logging configuration for actionbind.

Console output is human-readable. An optional rotating file receives one
JSON object per record, extras such as ``conversation_id`` included.
"""

import logging
import logging.config
from typing import Any

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _console_handler(level: str) -> dict[str, Any]:
    return {"class": "logging.StreamHandler", "formatter": "console", "level": level}


def _json_file_handler(log_file: str, level: str) -> dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": log_file,
        "maxBytes": LOG_FILE_MAX_BYTES,
        "backupCount": LOG_FILE_BACKUPS,
        "encoding": "utf-8",
        "formatter": "json",
        "level": level,
    }


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure the ``actionbind`` logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path of a rotating JSON log file, if any
    """
    handlers = {"console": _console_handler(level)}
    if log_file is not None:
        handlers["file"] = _json_file_handler(log_file, level)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
                "json": {"()": "pythonjsonlogger.json.JsonFormatter", "format": JSON_FIELDS},
            },
            "handlers": handlers,
            "loggers": {
                "actionbind": {"handlers": list(handlers), "level": level, "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )


class ContextLogger:
    """Module logger whose adapters stamp records with conversation context.

    Usage:
        logger = ContextLogger(__name__)
        logger.with_context(conversation_id="c1").info("Turn complete")
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> logging.LoggerAdapter:
        """Return an adapter adding ``context`` as extra fields to every record."""
        return logging.LoggerAdapter(self.logger, context)
