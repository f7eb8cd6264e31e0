"""Structured Logging - JSON formatter, setup, and the action-logging decorator.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (action, customer_id, error_code, path, duration_ms) surfaced when present
    - logged_action logs start, end and failure of a wrapped coroutine, then re-raises unchanged

Design Decisions:
    - JSONFormatter over third-party libs: full control of the field set
    - setup_logging called once on startup via lifespan
    - logged_action keeps the wrapped signature (functools.wraps) so FastAPI still
      resolves path, query, body and Depends parameters
"""

import functools
import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, TypeVar

_EXTRA_KEYS = ("action", "customer_id", "error_code", "path", "duration_ms")

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def logged_action(action: str, logger: logging.Logger | None = None) -> Callable[[F], F]:
    """Log start/end/failure around an async handler. Exceptions propagate untouched."""
    def decorator(func: F) -> F:
        log = logger or logging.getLogger(func.__module__)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            customer_id = kwargs.get("customer_id")
            log.info(
                f"{action} started",
                extra={"action": action, "customer_id": customer_id},
            )
            started = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as exc:
                log.warning(
                    f"{action} failed: {exc}",
                    extra={
                        "action": action,
                        "customer_id": customer_id,
                        "error_code": getattr(exc, "code", type(exc).__name__),
                        "duration_ms": _elapsed_ms(started),
                    },
                )
                raise
            log.info(
                f"{action} completed",
                extra={
                    "action": action,
                    "customer_id": customer_id,
                    "duration_ms": _elapsed_ms(started),
                },
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
