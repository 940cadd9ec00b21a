"""Presentation CLI exports."""
from .serve_command import build_parser, run, setup_and_start_server, startup_lines

__all__ = [
    "build_parser",
    "run",
    "setup_and_start_server",
    "startup_lines",
]
