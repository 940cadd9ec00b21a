"""Domain layer - Entities, enums, interfaces and startup errors."""
from .entities import (
    Target, AuthSettings, ServerSettings, Configuration,
    ProbeResult, CheckOutcome, HealthReport,
)
from .enums import CheckStatus
from .interfaces import IPortChecker
from .exceptions import (
    PortGuardError, ConfigurationError, NoTargetsError,
    ServerStartError, UsageError,
)

__all__ = [
    # Entities
    'Target',
    'AuthSettings',
    'ServerSettings',
    'Configuration',
    'ProbeResult',
    'CheckOutcome',
    'HealthReport',
    # Enums
    'CheckStatus',
    # Interfaces
    'IPortChecker',
    # Errors
    'PortGuardError',
    'ConfigurationError',
    'NoTargetsError',
    'ServerStartError',
    'UsageError',
]
