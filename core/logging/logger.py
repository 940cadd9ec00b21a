from __future__ import annotations

import functools
import logging
import os
import time
from typing import Any, Callable, Optional, Protocol, Union

from .context import bind as bind_ctx
from .levels import LogLevel


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


Message = Union[SupportsStr, Callable[[], SupportsStr]]


class StructuredLogger:
    """Thin wrapper over :class:`logging.Logger`.

    Messages may be passed as zero-argument callables so that expensive
    formatting only happens when the level is enabled. Every record is
    stamped with ``service``.
    """

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    @property
    def name(self) -> str:
        return self._logger.name

    def bind(self, **values: Any) -> "StructuredLogger":
        bind_ctx(**values)
        return self

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, msg: Message, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        message = msg() if callable(msg) else msg
        extra = dict(kwargs.pop("extra", None) or {})
        if self._service:
            extra.setdefault("service", self._service)
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, str(message), *args, extra=extra, **kwargs)

    def trace(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.TRACE), msg, *args, **kwargs)

    def debug(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def success(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, *args, **kwargs)

    def warning(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name), service=service)


def traceable(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Log entry/exit with timing at TRACE level when ``DEBUG_TRACE=true``."""
    if os.getenv("DEBUG_TRACE", "").lower() != "true":
        return fn

    logger = get_logger(fn.__module__, service="trace")

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        logger.trace(lambda: f"enter {fn.__qualname__}")
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            logger.error(lambda: f"exception in {fn.__qualname__}: {e}")
            raise
        finally:
            dur_ms = (time.perf_counter() - start) * 1000.0
            logger.trace(lambda: f"exit {fn.__qualname__}", extra={"execution_time_ms": round(dur_ms, 2)})

    return wrapper
