"""YAML configuration loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from config import settings
from core.logging.logger import get_logger, traceable
from domain.entities import AuthSettings, Configuration, ServerSettings, Target
from domain.exceptions import ConfigurationError
from .duration import parse_duration

log = get_logger(__name__, service="config")


@traceable
def load_configuration(path: Union[str, Path]) -> Configuration:
    """Read and validate the configuration file at ``path``.

    Missing optional fields fall back to the defaults in ``config.settings``.
    An empty file yields an empty configuration; rejecting that is the
    caller's decision.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"failed to read config file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"failed to parse config file: {e}") from e

    configuration = configuration_from_dict(data)
    log.debug(lambda: f"loaded {configuration.target_count} targets from {path}")
    return configuration


def configuration_from_dict(data: Optional[Mapping[str, Any]]) -> Configuration:
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationError("failed to parse config file: top level must be a mapping")

    server = _server_settings(_section(data, "server"))
    checks = data.get("checks") or []
    if not isinstance(checks, list):
        raise ConfigurationError("checks: must be a list")
    targets = tuple(_target(i, entry) for i, entry in enumerate(checks))
    return Configuration(server=server, targets=targets)


def _section(data: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{key}: must be a mapping")
    return dict(value)


def _server_settings(data: Dict[str, Any]) -> ServerSettings:
    host = data.get("host")
    port = data.get("port")
    timeout = data.get("timeout")
    auth = _section(data, "auth")

    default_timeout = _duration("server.timeout", timeout) if timeout not in (None, "") else 0.0
    return ServerSettings(
        listen_host=str(host) if host else settings.DEFAULT_LISTEN_HOST,
        listen_port=_port("server.port", port) if port not in (None, "") else settings.DEFAULT_LISTEN_PORT,
        default_timeout=default_timeout or settings.DEFAULT_TIMEOUT_S,
        auth=AuthSettings(
            enabled=_flag("server.auth.enabled", auth.get("enabled")),
            username=_text(auth.get("username")),
            password=_text(auth.get("password")),
        ),
    )


def _target(index: int, entry: Any) -> Target:
    where = f"checks[{index}]"
    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"{where}: must be a mapping")
    if entry.get("port") in (None, ""):
        raise ConfigurationError(f"{where}.port: required")

    timeout = entry.get("timeout")
    return Target(
        name=_text(entry.get("name")),
        host=_text(entry.get("host")),
        port=_port(f"{where}.port", entry.get("port")),
        description=_text(entry.get("description")),
        timeout=_duration(f"{where}.timeout", timeout) if timeout not in (None, "") else None,
    )


def _port(where: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{where}: invalid port {value!r}")
    try:
        port = int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"{where}: invalid port {value!r}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"{where}: port {port} out of range 1-65535")
    return port


def _duration(where: str, value: Any) -> float:
    try:
        return parse_duration(value)
    except ValueError as e:
        raise ConfigurationError(f"{where}: {e}") from e


def _flag(where: str, value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{where}: must be a boolean")
    return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def describe(configuration: Configuration) -> List[str]:
    """Human-readable target list for startup logs."""
    return [f"{t.name} ({t.address})" for t in configuration.targets]
