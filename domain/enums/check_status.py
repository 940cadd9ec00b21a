"""Probe and report status enumeration."""
from enum import Enum


class CheckStatus(Enum):
    """Reachability verdict for a single target or a whole report."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"

    @property
    def is_healthy(self) -> bool:
        return self is CheckStatus.HEALTHY

    @classmethod
    def from_bool(cls, ok: bool) -> 'CheckStatus':
        return cls.HEALTHY if ok else cls.UNHEALTHY
