from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def bind(**values: Any) -> None:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    _context.set(current)


@contextmanager
def request_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Bind ``values`` for the duration of one request; restored on exit.

    Each asyncio task gets its own copy of the context, so concurrent
    requests never see each other's fields.
    """
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    token = _context.set(current)
    try:
        yield current
    finally:
        _context.reset(token)
