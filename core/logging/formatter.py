from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import record_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: v for k, v in vars(record).items()
        if k not in _STANDARD_ATTRS and k not in ("service", "execution_time_ms", "log_context")
    }


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            md = _record_metadata(record)
            lvl = md["level"]
            parts = [
                md["timestamp"],
                lvl,
                md["service"] or "-",
                f"{record.module}:{md['function']}:{md['line_number']}",
                record.getMessage(),
            ]
            exec_ms = getattr(record, "execution_time_ms", None)
            if exec_ms is not None:
                parts.append(f"t={exec_ms}ms")
            fields = {**record_context(record), **_extras(record)}
            if fields:
                parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            return f"{_LEVEL_COLORS.get(lvl, '')}{' | '.join(parts)}{_RESET}"
        except Exception:
            return record.getMessage()


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        ctx = record_context(record)
        if ctx:
            payload["context"] = ctx
        extra = _extras(record)
        if extra:
            payload["extra"] = extra
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
