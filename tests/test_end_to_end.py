from __future__ import annotations

import time

from fastapi.testclient import TestClient

from application.services.health import HealthAggregator, TCPPortChecker
from conftest import UNROUTABLE_HOST, make_configuration
from domain.entities import Target
from presentation.http import create_app


def test_one_reachable_one_blackholed(listening_port: int) -> None:
    targets = [
        Target(name="local", host="127.0.0.1", port=listening_port, description="listener"),
        Target(name="nowhere", host=UNROUTABLE_HOST, port=9, description="black hole", timeout=0.5),
    ]
    app = create_app(
        make_configuration(targets),
        aggregator=HealthAggregator(TCPPortChecker(), version="e2e"),
        version="e2e",
    )

    with TestClient(app) as client:
        start = time.monotonic()
        resp = client.get("/health")
        elapsed = time.monotonic() - start

    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "unhealthy"
    assert len(body["checks"]) == 2
    local, nowhere = body["checks"]
    assert local["status"] == "healthy"
    assert "error" not in local
    assert nowhere["status"] == "unhealthy"
    assert nowhere["error"]
    assert elapsed < 0.5 + 1.5
