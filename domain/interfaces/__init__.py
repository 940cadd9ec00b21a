"""Domain interfaces."""
from .checker import IPortChecker

__all__ = [
    'IPortChecker',
]
