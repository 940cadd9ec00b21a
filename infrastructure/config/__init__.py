"""Configuration file loading."""
from .duration import parse_duration, format_duration
from .yaml_loader import load_configuration, configuration_from_dict

__all__ = [
    "parse_duration",
    "format_duration",
    "load_configuration",
    "configuration_from_dict",
]
