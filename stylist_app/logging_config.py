"""Structured logging helpers for the wardrobe stylist service."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator

CORRELATION_ID = contextvars.ContextVar("correlation_id", default=None)
_RESERVED_RECORD_KEYS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}
_REDACT_KEYS = {
    "api_key",
    "google_api_key",
    "prompt",
    "raw_response",
    "user_id",
    "owner_id",
    "wardrobe",
}


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per record, carrying the correlation id."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", record.getMessage()),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_KEYS or key in payload:
                continue
            payload[key] = redact_for_log(value, key)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Configure root logging with JSON output."""

    desired_level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.root.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=desired_level, handlers=[handler])


def redact_for_log(payload: Any, key: str | None = None) -> Any:
    """Recursively mask secrets, prompts and user identifiers."""

    if key in _REDACT_KEYS and payload is not None:
        return "[redacted]"
    if payload is None or isinstance(payload, (str, int, float, bool)):
        return payload
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, dict):
        return {name: redact_for_log(value, str(name)) for name, value in payload.items()}
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger ensuring configuration is applied."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return an existing correlation id or assign a new one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    new_id = uuid.uuid4().hex
    CORRELATION_ID.set(new_id)
    return new_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Context manager to temporarily set a correlation id."""

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit a structured log entry with correlation metadata."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    safe_fields = {name: redact_for_log(value, name) for name, value in fields.items()}
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **safe_fields},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id around one named operation."""

    with correlation_context(correlation_id) as scoped_id:
        logging.getLogger(__name__).debug("operation %s started", name, extra={"operation": name})
        yield scoped_id


__all__ = [
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
    "operation_context",
]
