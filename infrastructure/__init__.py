"""Infrastructure layer - configuration loading and server runtime."""
from .config import load_configuration, parse_duration
from .server import ServerStarter, serve

__all__ = [
    'load_configuration',
    'parse_duration',
    'ServerStarter',
    'serve',
]
