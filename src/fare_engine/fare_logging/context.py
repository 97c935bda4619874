"""Per-quote logging context.

Backed by a ContextVar so that quotes priced concurrently, whether on
threads or inside an event loop, never see each other's fields.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("fare_log_context")


def get_log_context() -> dict[str, Any]:
    return dict(_log_context.get({}))


class ContextFilter(logging.Filter):
    """Injects the active log context fields into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get({}).items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Add fields to every log record emitted inside the block.

    Nested blocks extend the outer context; leaving a block restores it.
    """
    token = _log_context.set({**_log_context.get({}), **kwargs})
    try:
        yield
    finally:
        _log_context.reset(token)


@contextmanager
def log_quote_context(quote_id: str, **kwargs: Any) -> Iterator[None]:
    """Convenience context manager for a single fare quote."""
    correlation_id = kwargs.pop("correlation_id", quote_id)
    with log_context(quote_id=quote_id, correlation_id=correlation_id, **kwargs):
        yield
