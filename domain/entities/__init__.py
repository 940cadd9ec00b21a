"""Domain entities."""
from .target import Target, AuthSettings, ServerSettings, Configuration
from .probe import ProbeResult
from .report import CheckOutcome, HealthReport

__all__ = [
    'Target',
    'AuthSettings',
    'ServerSettings',
    'Configuration',
    'ProbeResult',
    'CheckOutcome',
    'HealthReport',
]
