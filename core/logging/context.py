from __future__ import annotations

import contextvars
import logging
from typing import Any, Dict

# Per-task log context; asyncio copies it into every task it creates, so a
# member bound inside one leaderboard task never leaks into its siblings.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    return current


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> None:
    _context.set(_merged(values))


def unbind(*keys: str) -> None:
    current = dict(_context.get())
    for k in keys:
        current.pop(k, None)
    _context.set(current)


class context(object):
    """Bind values for the duration of a ``with`` block."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        merged = _merged(self._values)
        self._token = _context.set(merged)
        return merged

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False


class ContextFilter(logging.Filter):
    """Copy the bound context onto the record while still in the logging task."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "log_context"):
            record.log_context = get_context()
        return True


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    ctx = getattr(record, "log_context", None)
    return dict(ctx) if ctx is not None else get_context()
