"""Structured Logging - JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (expense_id, error_code, path) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: calling it twice never duplicates output

Design Decisions:
    - JSONFormatter is a plain logging.Formatter subclass
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("expense_id", "error_code", "path")

_HANDLER_NAME = "expense_tracker"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
