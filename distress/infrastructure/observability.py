"""Structured Logging — JSON formatter and setup for CLI and API runs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, line_number, packet_count, ...) surfaced when present
    - Logs go to stderr; stdout is reserved for answers
    - setup_logging is idempotent: repeated calls replace, never stack, its handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once per entry point (CLI main, API lifespan)
"""

import logging
import json
import sys
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "error_code", "path", "source", "line_number", "column",
    "packet_count", "pair_count", "part1", "part2",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _DistressHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "WARNING", fmt: str = "text"):
    """Configure root logging for the process."""
    handler = _DistressHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _DistressHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
