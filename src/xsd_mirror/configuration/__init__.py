"""Configuration domain exports."""

from .loader import ConfigurationError, load_configuration
from .runtime_settings import FetchSettings, MirrorSettings

__all__ = [
    "FetchSettings",
    "MirrorSettings",
    "ConfigurationError",
    "load_configuration",
]
