"""Application services root exports."""
from .health import HealthAggregator, TCPPortChecker, TimeoutPolicy

__all__ = [
    "HealthAggregator",
    "TCPPortChecker",
    "TimeoutPolicy",
]
