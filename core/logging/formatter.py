from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

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

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "service"}


def _timestamp(record: logging.LogRecord) -> str:
    base = time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created))
    return f"{base}.{int(record.msecs):03d}"


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")}


class ConsoleFormatter(logging.Formatter):
    """``time | LEVEL | service | logger | message | key=value ...``"""

    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        fields = {**get_context(), **_extras(record)}
        parts = [
            _timestamp(record),
            f"{record.levelname:<8}",
            getattr(record, "service", None) or "-",
            record.name,
            record.getMessage(),
        ]
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self.color:
            return line
        return f"{_LEVEL_COLORS.get(record.levelname, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    """One JSON object per line for the rotating log file."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _timestamp(record),
            "level": record.levelname,
            "service": getattr(record, "service", None),
            "logger": record.name,
            "function": record.funcName,
            "line_number": record.lineno,
            "message": record.getMessage(),
        }
        ctx = get_context()
        if ctx:
            payload["context"] = ctx
        extra = _extras(record)
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
