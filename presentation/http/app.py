"""FastAPI application factory."""
import time
from typing import Optional

from fastapi import FastAPI, Request

from application.services.health import HealthAggregator, TCPPortChecker
from config import settings
from core.logging.context import request_context
from core.logging.logger import get_logger
from domain.entities import Configuration
from .auth import require_basic_auth
from .handlers import health_handler, live, root_handler

log = get_logger("portguard.http", service="http")


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    client = request.client.host if request.client else None
    with request_context(method=request.method, path=request.url.path, client=client):
        response = await call_next(request)
        dur_ms = round((time.perf_counter() - start) * 1000.0, 2)
        log.info(lambda: "request", extra={"status": response.status_code, "duration_ms": dur_ms})
    return response


def create_app(
    configuration: Configuration,
    *,
    aggregator: Optional[HealthAggregator] = None,
    version: Optional[str] = None,
) -> FastAPI:
    """Build the ASGI app: every route is wrapped by the auth gate.

    Routes carry no method list, so any HTTP method reaches the gate.
    """
    version = version or settings.APP_VERSION
    if aggregator is None:
        aggregator = HealthAggregator(TCPPortChecker(), version=version)

    app = FastAPI(
        title=settings.APP_NAME,
        version=version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.configuration = configuration
    app.middleware("http")(log_requests)

    auth = configuration.server.auth
    root = require_basic_auth(auth, root_handler(configuration, app_name=settings.APP_NAME, version=version))

    app.add_route("/health", require_basic_auth(auth, health_handler(configuration, aggregator)), include_in_schema=False)
    app.add_route("/live", require_basic_auth(auth, live), include_in_schema=False)
    # Unknown paths fall through to the root handler, which answers 404 after auth.
    app.add_route("/", root, include_in_schema=False)
    app.add_route("/{path:path}", root, include_in_schema=False)
    return app
