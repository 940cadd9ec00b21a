from __future__ import annotations

import json

from domain.entities import CheckOutcome, HealthReport
from domain.enums import CheckStatus


def _report() -> HealthReport:
    return HealthReport(
        status=CheckStatus.UNHEALTHY,
        message="Failed ports: [db (db.local:5432)]",
        checks=[
            CheckOutcome("web", "localhost", 8080, "Web server", CheckStatus.HEALTHY),
            CheckOutcome("db", "db.local", 5432, "Database", CheckStatus.UNHEALTHY, "db.local:5432: connection refused"),
        ],
        timestamp="2026-10-19T12:00:00+00:00",
        version="1.0.0",
    )


def test_wire_shape() -> None:
    data = _report().to_dict()

    assert list(data) == ["status", "message", "checks", "timestamp", "version"]
    assert data["status"] == "unhealthy"
    assert list(data["checks"][1]) == ["name", "host", "port", "description", "status", "error"]


def test_json_round_trip_is_lossless() -> None:
    original = _report()
    restored = HealthReport.from_dict(json.loads(json.dumps(original.to_dict())))

    assert restored == original


def test_error_key_omitted_when_empty() -> None:
    healthy = CheckOutcome("web", "localhost", 80, "", CheckStatus.HEALTHY).to_dict()
    blank = CheckOutcome("web", "localhost", 80, "", CheckStatus.UNHEALTHY, "").to_dict()
    failing = CheckOutcome("web", "localhost", 80, "", CheckStatus.UNHEALTHY, "refused").to_dict()

    assert "error" not in healthy
    assert "error" not in blank
    assert failing["error"] == "refused"


def test_failed_lists_unhealthy_outcomes() -> None:
    report = _report()

    assert [c.name for c in report.failed] == ["db"]
    assert not report.healthy
