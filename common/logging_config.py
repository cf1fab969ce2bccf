"""
Logging configuration.

Emits one JSON object per log line on stderr.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ROOT_LOGGERS = ("ledger", "players", "engine", "simulation")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str | int | None = "WARNING") -> None:
    """
    Attach a JSON handler to the project's loggers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number.
            Empty or unknown values fall back to WARNING.
    """
    if isinstance(level, int):
        numeric = level
    else:
        numeric = getattr(logging, str(level or "WARNING").upper(), logging.WARNING)
        if not isinstance(numeric, int):
            numeric = logging.WARNING

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())

    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        # Remove existing handlers to avoid duplicates
        for existing in logger.handlers[:]:
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(numeric)
        logger.propagate = False
