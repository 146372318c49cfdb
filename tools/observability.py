"""Observability helpers for instrumenting collaborator and engine calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from stylist_app.logging_config import ensure_correlation_id, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        if isinstance(value, (list, tuple)):
            preview[key] = f"<{len(value)} entries>"
        else:
            preview[key] = value
    return redact_for_log(preview)


def instrument_call(call_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable to emit structured start/complete/fail logs with timings."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()
            log_event(
                LOGGER,
                logging.INFO,
                "call_started",
                call=call_name,
                correlation_id=correlation_id,
                call_kwargs=_preview_kwargs(kwargs),
            )
            try:
                result = func(*args, **kwargs)
            except Exception:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "call_failed",
                    call=call_name,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                    exc_info=True,
                )
                raise
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log_event(
                LOGGER,
                logging.INFO,
                "call_completed",
                call=call_name,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_call"]
