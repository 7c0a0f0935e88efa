"""
FIX Helper - Core Module

Configuration management, exception hierarchy and logging setup.
"""

from .config import Config, Preferences, ReferenceConfig, get_config, set_config, load_config
from .exceptions import (
    FixHelperException,
    ConfigurationException,
    VersionNotFoundException,
    TagNotFoundException,
    DataException,
)
from .structured_logging import configure_logging

__all__ = [
    "Config",
    "Preferences",
    "ReferenceConfig",
    "get_config",
    "set_config",
    "load_config",
    "FixHelperException",
    "ConfigurationException",
    "VersionNotFoundException",
    "TagNotFoundException",
    "DataException",
    "configure_logging",
]
