from .timeout_config import TimeoutPolicy
from .port_checker import TCPPortChecker
from .health_manager import HealthAggregator, SUCCESS_MESSAGE

__all__ = [
    "TimeoutPolicy",
    "TCPPortChecker",
    "HealthAggregator",
    "SUCCESS_MESSAGE",
]
