"""Production server starter backed by uvicorn."""
from __future__ import annotations

import socket
from typing import Any, Callable

import uvicorn

from core.logging.logger import get_logger
from domain.exceptions import ServerStartError

ServerStarter = Callable[[str, int, Any], None]

log = get_logger(__name__, service="server")


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listener up front so failures surface as ``ServerStartError``."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise ServerStartError(f"listen tcp {host}:{port}: {e.strerror or e}") from e
    sock.set_inheritable(True)
    return sock


def serve(host: str, port: int, app: Any) -> None:
    """Run ``app`` until SIGINT/SIGTERM. Blocks the calling thread."""
    sock = bind_socket(host, port)
    config = uvicorn.Config(
        app,
        log_config=None,
        access_log=False,
        server_header=False,
        lifespan="off",
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    ensure_started(server, host, port)
    log.info("server stopped")


def ensure_started(server: Any, host: str, port: int) -> None:
    """Fail when uvicorn gave up during startup.

    A shutdown signal received before startup finished sets ``should_exit``
    and counts as a clean stop.
    """
    if not server.started and not server.should_exit:
        raise ServerStartError(f"server on {host}:{port} exited before it started")
