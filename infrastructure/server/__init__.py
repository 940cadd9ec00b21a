"""HTTP server runtime."""
from .uvicorn_server import ServerStarter, bind_socket, ensure_started, serve

__all__ = [
    "ServerStarter",
    "bind_socket",
    "ensure_started",
    "serve",
]
