"""Startup-fatal error taxonomy.

Per-target probe failures are never raised; they are reported as data on
``CheckOutcome.error``. Everything here aborts process startup.
"""


class PortGuardError(Exception):
    """Base class for errors that stop the service from starting."""


class ConfigurationError(PortGuardError):
    """The configuration file is missing, unreadable or invalid."""


class NoTargetsError(PortGuardError):
    """The configuration loaded but lists no targets to probe."""


class ServerStartError(PortGuardError):
    """The HTTP listener could not be bound or stopped with an error."""


class UsageError(PortGuardError):
    """The command line could not be parsed."""
