"""Structured Logging — JSON request/access logs and a replaceable root handler.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request extras (method, path, status_code, origin, error_code) surfaced when
      present; the cross-origin middleware emits one access line per request
    - setup_logging is idempotent: each call replaces the handler a previous call
      installed, so repeated app lifespans never duplicate log lines
    - Handlers installed by anyone else (pytest, uvicorn) are left alone

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Our handler identified by name, not by type: StreamHandlers are common
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "dice_api"
EXTRA_FIELDS = ("method", "path", "status_code", "origin", "error_code")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, request extras flattened in."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the service log handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()
    handler = build_handler(fmt)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
