"""
Test Factories Module

Centralized factory functions for creating test configuration data and files.
"""

from .config_factories import (
    fixture_path,
    make_config,
    make_contacts,
    make_invalid_config,
    make_minimal_config,
    temp_config_file,
)

__all__ = [
    "fixture_path",
    "make_config",
    "make_contacts",
    "make_invalid_config",
    "make_minimal_config",
    "temp_config_file",
]
