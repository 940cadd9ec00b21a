"""Single TCP probe outcome."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class ProbeResult:
    """Outcome of one connection attempt. ``error`` is set only on failure."""
    host: str
    port: int
    success: bool
    latency_ms: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, host: str, port: int, latency_ms: int) -> "ProbeResult":
        return cls(host=host, port=port, success=True, latency_ms=latency_ms)

    @classmethod
    def failed(cls, host: str, port: int, error: str, latency_ms: Optional[int] = None) -> "ProbeResult":
        return cls(host=host, port=port, success=False, latency_ms=latency_ms, error=error)
