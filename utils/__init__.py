"""
Utilities Package

Common utilities shared by the site configuration tooling.
"""

from .errors import ConfigError, SerializationError, SiteConfigError
from .logging import get_logger, setup_logging, shutdown_logging

__all__ = [
    "ConfigError",
    "SerializationError",
    "SiteConfigError",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
