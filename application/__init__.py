"""Application layer - health checking services."""
from .services import HealthAggregator, TCPPortChecker

__all__ = [
    'HealthAggregator',
    'TCPPortChecker',
]
