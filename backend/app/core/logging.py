"""Structured JSON logging configuration."""

import logging
import sys
from typing import Any

import json

from app.core.request_context import get_request_id


class RequestIdFilter(logging.Filter):
    """Attach the current request ID to records that don't carry one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            request_id = get_request_id()
            if request_id:
                record.request_id = request_id
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "request_id"):
            log_obj["requestId"] = record.request_id

        if isinstance(getattr(record, "context", None), dict):
            log_obj["context"] = record.context

        return json.dumps(log_obj, default=str)


def setup_logging(debug: bool = False) -> None:
    """Configure structured JSON logging."""
    level = logging.DEBUG if debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())

    logging.root.handlers = [handler]
    logging.root.setLevel(level)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
