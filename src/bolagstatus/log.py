"""
bolagstatus Logging Setup

Structured JSON logging for the service, plain text for interactive use.
All loggers live under the "bolagstatus" namespace.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "bolagstatus"

# Extra attributes copied into JSON log entries when present
EXTRA_FIELDS = (
    "request_id",
    "path",
    "status_code",
    "duration_ms",
    "state",
    "query",
    "error_code",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


TEXT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def configure_logging(level: str = "INFO", fmt: str = "json") -> logging.Logger:
    """
    Configure the "bolagstatus" logger.

    Calling it again replaces the handler instead of adding another one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(logger.handlers):
        if getattr(existing, "_bolagstatus", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._bolagstatus = True
    logger.addHandler(handler)
    return logger
