"""Probe strategy interface."""
from abc import ABC, abstractmethod

from ..entities import ProbeResult


class IPortChecker(ABC):
    """Reachability probe for a single host/port."""

    @abstractmethod
    async def check(self, host: str, port: int, timeout: float) -> ProbeResult:
        """Attempt one connection, giving up after ``timeout`` seconds."""
        pass
