"""Structured logging: levels, context binding, formatters and bootstrap."""
from .config import bootstrap_logging, shutdown_logging
from .context import ContextFilter, bind, context, get_context, unbind
from .levels import LogLevel
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "ContextFilter",
    "bind",
    "context",
    "get_context",
    "unbind",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
