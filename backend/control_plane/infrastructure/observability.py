"""Structured Logging: one JSON object per line for the control plane.

Invariants:
    - Every line carries timestamp (record time, UTC), level, logger, service, message
    - Lookup fields (slug, error_code) and access fields (method, path,
      status_code, duration_ms) appear only when set on the record
    - Failures carry error_type plus the formatted traceback
    - setup_logging is idempotent: calling it again replaces its own handler
    - uvicorn's access logger is quieted; request_logging_middleware owns access lines

Design Decisions:
    - JSONFormatter on stdlib logging: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "control-plane"

LOOKUP_FIELDS = ("slug", "error_code")
ACCESS_FIELDS = ("method", "path", "status_code", "duration_ms")

_HANDLER_NAME = "control_plane"


class JSONFormatter(logging.Formatter):
    """Format records as single-line JSON."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        for key in LOOKUP_FIELDS + ACCESS_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log["error_type"] = record.exc_info[0].__name__
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the control-plane handler on the root logger and return it."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return handler
