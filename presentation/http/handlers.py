"""Request handlers for the health, liveness and root endpoints."""
from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from application.services.health import HealthAggregator
from domain.entities import Configuration
from .auth import Handler
from .pages import render_index


def health_handler(configuration: Configuration, aggregator: HealthAggregator) -> Handler:
    async def health(request: Request) -> Response:
        report = await aggregator.evaluate(configuration)
        return JSONResponse(report.to_dict(), status_code=200 if report.healthy else 503)

    return health


async def live(request: Request) -> Response:
    """Process-is-up signal; never looks at targets."""
    return PlainTextResponse("OK", status_code=200)


def root_handler(configuration: Configuration, *, app_name: str, version: str) -> Handler:
    page = render_index(app_name=app_name, version=version, target_count=configuration.target_count)

    async def root(request: Request) -> Response:
        if request.url.path != "/":
            return PlainTextResponse("404 page not found", status_code=404)
        return HTMLResponse(page)

    return root
