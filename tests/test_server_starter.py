from __future__ import annotations

from types import SimpleNamespace

import pytest

from domain.exceptions import ServerStartError
from infrastructure.server.uvicorn_server import bind_socket, ensure_started


def test_bind_free_port(closed_port: int) -> None:
    sock = bind_socket("127.0.0.1", closed_port)
    try:
        assert sock.getsockname()[1] == closed_port
    finally:
        sock.close()


def test_bind_busy_port_raises(listening_port: int) -> None:
    with pytest.raises(ServerStartError) as exc:
        bind_socket("127.0.0.1", listening_port)

    assert f"listen tcp 127.0.0.1:{listening_port}" in str(exc.value)


def test_shutdown_before_startup_is_clean() -> None:
    ensure_started(SimpleNamespace(started=False, should_exit=True), "127.0.0.1", 8888)
    ensure_started(SimpleNamespace(started=True, should_exit=True), "127.0.0.1", 8888)


def test_startup_failure_raises() -> None:
    with pytest.raises(ServerStartError, match="exited before it started"):
        ensure_started(SimpleNamespace(started=False, should_exit=False), "127.0.0.1", 8888)
