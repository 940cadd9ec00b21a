"""Configuration entities: probe targets and server settings."""
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Target:
    """One configured host/port to probe.

    ``timeout`` is in seconds. ``None`` or ``0`` means the server-wide
    default applies.
    """

    name: str
    host: str
    port: int
    description: str = ""
    timeout: Optional[float] = None

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class AuthSettings:
    """HTTP Basic Authentication settings."""

    enabled: bool = False
    username: str = ""
    password: str = ""

    @property
    def armed(self) -> bool:
        """Credentials are only enforced when enabled and both fields are set."""
        return self.enabled and bool(self.username) and bool(self.password)


@dataclass(frozen=True)
class ServerSettings:
    listen_host: str = "0.0.0.0"
    listen_port: int = 8888
    default_timeout: float = 2.0
    auth: AuthSettings = field(default_factory=AuthSettings)

    @property
    def listen_address(self) -> str:
        return f"{self.listen_host}:{self.listen_port}"


@dataclass(frozen=True)
class Configuration:
    """Loaded once at startup and shared read-only by every request."""

    server: ServerSettings = field(default_factory=ServerSettings)
    targets: Tuple[Target, ...] = ()

    @property
    def target_count(self) -> int:
        return len(self.targets)
