from __future__ import annotations

from typing import Any, List, Tuple

import pytest

import main as entrypoint
from config import settings
from domain.exceptions import ConfigurationError, NoTargetsError, ServerStartError, UsageError
from presentation.cli import run, startup_lines
from infrastructure.config import load_configuration

VALID = """
    server:
      port: "9911"
      timeout: 1s
      auth:
        enabled: true
        username: admin
        password: s3cret
    checks:
      - name: web
        host: localhost
        port: 8080
"""


class RecordingStarter:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: List[Tuple[str, int, Any]] = []

    def __call__(self, host: str, port: int, app: Any) -> None:
        self.calls.append((host, port, app))
        if self.error:
            raise self.error


def _no_exit(code: int) -> None:
    raise AssertionError(f"exit({code}) called")


def test_version_prints_and_exits(capsys) -> None:
    codes: List[int] = []
    starter = RecordingStarter()

    run(["--version"], exit=codes.append, start_server=starter)

    assert codes == [0]
    assert capsys.readouterr().out == f"PortGuard version {settings.APP_VERSION}\n"
    assert starter.calls == []


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_prints_usage_and_uses_injected_exit(flag, capsys) -> None:
    codes: List[int] = []
    starter = RecordingStarter()

    run([flag], exit=codes.append, start_server=starter)

    assert codes == [0]
    out = capsys.readouterr().out
    assert "usage: portguard" in out
    assert "--config" in out
    assert starter.calls == []


def test_single_dash_flags_accepted(capsys) -> None:
    codes: List[int] = []
    run(["-version"], exit=codes.append, start_server=RecordingStarter())

    assert codes == [0]


def test_unknown_flag_is_usage_error() -> None:
    with pytest.raises(UsageError):
        run(["--bogus"], exit=_no_exit, start_server=RecordingStarter())


def test_missing_config_file(tmp_path) -> None:
    missing = tmp_path / "absent.yaml"
    starter = RecordingStarter()

    with pytest.raises(ConfigurationError) as exc:
        run(["--config", str(missing)], exit=_no_exit, start_server=starter)

    assert "error loading configuration" in str(exc.value)
    assert str(missing) in str(exc.value)
    assert starter.calls == []


def test_default_config_path_used(monkeypatch, tmp_path) -> None:
    missing = tmp_path / "default.yaml"
    monkeypatch.setattr(settings, "CONFIG_PATH", str(missing))

    with pytest.raises(ConfigurationError) as exc:
        run([], exit=_no_exit, start_server=RecordingStarter())

    assert str(missing) in str(exc.value)


def test_no_checks_configured(write_config) -> None:
    path = write_config("server:\n  port: 9000\nchecks: []\n")
    starter = RecordingStarter()

    with pytest.raises(NoTargetsError) as exc:
        run(["--config", str(path)], exit=_no_exit, start_server=starter)

    assert "no port checks configured" in str(exc.value)
    assert starter.calls == []


def test_starts_server_with_loaded_settings(write_config) -> None:
    path = write_config(VALID)
    starter = RecordingStarter()

    run(["--config", str(path)], exit=_no_exit, start_server=starter)

    assert len(starter.calls) == 1
    host, port, app = starter.calls[0]
    assert (host, port) == ("0.0.0.0", 9911)
    configuration = app.state.configuration
    assert configuration.server.auth.armed
    assert [t.name for t in configuration.targets] == ["web"]


def test_server_failure_is_wrapped(write_config) -> None:
    path = write_config(VALID)
    starter = RecordingStarter(OSError("address already in use"))

    with pytest.raises(ServerStartError) as exc:
        run(["-config", str(path)], exit=_no_exit, start_server=starter)

    assert str(exc.value).startswith("server error:")
    assert "address already in use" in str(exc.value)


def test_startup_lines(write_config) -> None:
    path = write_config(VALID)
    lines = startup_lines(load_configuration(path), str(path))

    assert f"Configuration loaded from: {path}" in lines
    assert "Monitoring 1 ports with 1s timeout" in lines
    assert "HTTP Basic Authentication: ENABLED (username: admin)" in lines
    assert "HTTP server listening on 0.0.0.0:9911" in lines
    assert "  - http://localhost:9911/health (detailed JSON status)" in lines


@pytest.fixture
def quiet_main(monkeypatch):
    monkeypatch.setattr(entrypoint, "bootstrap_logging", lambda **kwargs: None)
    monkeypatch.setattr(entrypoint, "shutdown_logging", lambda: None)


@pytest.mark.parametrize(
    "error, code",
    [
        (None, entrypoint.EXIT_OK),
        (UsageError("unrecognized arguments: --bogus"), entrypoint.EXIT_USAGE),
        (NoTargetsError("no port checks configured"), entrypoint.EXIT_FAILURE),
        (ConfigurationError("error loading configuration"), entrypoint.EXIT_FAILURE),
        (ServerStartError("server error: boom"), entrypoint.EXIT_FAILURE),
    ],
)
def test_main_exit_codes(quiet_main, monkeypatch, error, code) -> None:
    def fake_run(argv):
        if error:
            raise error

    monkeypatch.setattr(entrypoint, "run", fake_run)

    assert entrypoint.main([]) == code


def test_main_usage_goes_to_stderr(quiet_main, capsys) -> None:
    assert entrypoint.main(["--bogus"]) == entrypoint.EXIT_USAGE

    err = capsys.readouterr().err
    assert "usage: portguard" in err
    assert "--bogus" in err
