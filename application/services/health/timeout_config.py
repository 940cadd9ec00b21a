from __future__ import annotations

from dataclasses import dataclass

from domain.entities import ServerSettings, Target


@dataclass(slots=True, frozen=True)
class TimeoutPolicy:
    """Resolves the effective timeout for each target."""
    default_s: float

    @classmethod
    def from_server(cls, server: ServerSettings) -> "TimeoutPolicy":
        return cls(default_s=server.default_timeout)

    def for_target(self, target: Target) -> float:
        """Per-target timeout when set and non-zero, otherwise the server default.

        A per-target value wins even when it is longer than the default.
        """
        if target.timeout:
            return target.timeout
        return self.default_s
