from __future__ import annotations

import logging
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None

# uvicorn installs its own handlers unless told otherwise; route its records
# through the root handlers configured here instead.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def bootstrap_logging(
    *,
    service: str = "portguard",
    level: str | int | None = None,
    console: bool = True,
    console_level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "portguard.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level)
    root.setLevel(lvl)

    if console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(to_level(console_level, default=lvl))
        handler.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    logging.getLogger(service).debug("logging configured", extra={"service": service})


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
