"""Structured Logging: JSON and key=value formatters for listing observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Listing context (listing, generation, item_count, error_code,
      missing_fields, endpoint, status_code, path) is surfaced in both formats
      when present on the record
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - setup_logging called once on startup via lifespan
    - httpx request lines are demoted to WARNING unless the app logs at DEBUG
"""

import logging
import json
from datetime import datetime, timezone
from typing import Any

CONTEXT_FIELDS = (
    "listing", "generation", "item_count", "error_code",
    "missing_fields", "endpoint", "status_code", "path",
)

_HANDLER_NAME = "catalog"


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Listing context fields set on a record via `extra=`."""
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for production log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with the listing context appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, rest = line.partition("\n")
        return f"{head} [{pairs}]{sep}{rest}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    logging.root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.root.setLevel(root_level)
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING,
    )
    return handler
