"""Domain enumerations."""
from .check_status import CheckStatus

__all__ = [
    'CheckStatus',
]
