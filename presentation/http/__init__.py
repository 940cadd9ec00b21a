"""HTTP surface."""
from .app import create_app
from .auth import require_basic_auth, parse_basic_credentials, credentials_match

__all__ = [
    "create_app",
    "require_basic_auth",
    "parse_basic_credentials",
    "credentials_match",
]
