"""Structured logging: bootstrap, formatters and request context."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, get_context, request_context
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "get_context",
    "request_context",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
