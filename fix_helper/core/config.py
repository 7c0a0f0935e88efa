"""
FIX Helper - Configuration Management

This module provides configuration management for FIX Helper, supporting
YAML configuration files and environment variables. The host launcher's
preferences (default FIX version, icon display) live here as well.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from pathlib import Path
from enum import Enum
import logging

from .exceptions import ConfigurationException

logger = logging.getLogger(__name__)

DEFAULT_FIX_VERSION = "FIX.4.4"
ONIXS_DICTIONARY_URL = "https://www.onixs.biz/fix-dictionary"


class Environment(str, Enum):
    """Environment types for configuration."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _parse_bool(value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Preferences:
    """User preferences supplied by the host launcher."""

    default_version: str = DEFAULT_FIX_VERSION
    show_icons: bool = True

    def __post_init__(self):
        if not isinstance(self.default_version, str):
            raise ConfigurationException(
                f"Default FIX version must be a string, got {self.default_version!r}",
                config_key="preferences.default_version",
            )
        self.show_icons = _parse_bool(self.show_icons)


@dataclass
class ReferenceConfig:
    """External reference dictionary settings."""

    base_url: str = ONIXS_DICTIONARY_URL

    def __post_init__(self):
        if not isinstance(self.base_url, str):
            raise ConfigurationException(
                f"Reference base URL must be a string, got {self.base_url!r}",
                config_key="reference.base_url",
            )
        self.base_url = self.base_url.rstrip("/")


@dataclass
class Config:
    """Main configuration class."""

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    service_name: str = "fix-helper"
    version: str = "1.0.0"
    structured_logs: bool = False

    preferences: Preferences = field(default_factory=Preferences)
    reference: ReferenceConfig = field(default_factory=ReferenceConfig)

    # Directory of *.yaml datasets replacing the bundled ones
    data_path: Optional[str] = None

    @classmethod
    def load_from_file(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationException(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Invalid YAML in configuration file: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationException(
                f"Configuration file must contain a mapping: {config_path}"
            )

        try:
            return cls._from_dict(config_data)
        except (TypeError, ValueError) as e:
            raise ConfigurationException(f"Error loading configuration file: {e}")

    @classmethod
    def load_from_env(cls, prefix: str = "FIX_HELPER_") -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        config.environment = Environment(
            os.getenv(f"{prefix}ENVIRONMENT", config.environment.value)
        )
        config.log_level = LogLevel(
            os.getenv(f"{prefix}LOG_LEVEL", config.log_level.value).upper()
        )
        config.structured_logs = _parse_bool(
            os.getenv(f"{prefix}STRUCTURED_LOGS", str(config.structured_logs))
        )

        config.preferences = Preferences(
            default_version=os.getenv(
                f"{prefix}DEFAULT_VERSION", config.preferences.default_version
            ),
            show_icons=os.getenv(
                f"{prefix}SHOW_ICONS", str(config.preferences.show_icons)
            ),
        )
        if os.getenv(f"{prefix}REFERENCE_BASE_URL"):
            config.reference = ReferenceConfig(
                base_url=os.environ[f"{prefix}REFERENCE_BASE_URL"]
            )
        config.data_path = os.getenv(f"{prefix}DATA_PATH", config.data_path)

        return config

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        config = cls()

        if "environment" in data:
            config.environment = Environment(data["environment"])
        if "log_level" in data:
            config.log_level = LogLevel(str(data["log_level"]).upper())
        if "structured_logs" in data:
            config.structured_logs = _parse_bool(data["structured_logs"])

        if "preferences" in data:
            config.preferences = Preferences(**data["preferences"])
        if "reference" in data:
            config.reference = ReferenceConfig(**data["reference"])

        for key in ["service_name", "data_path"]:
            if key in data:
                setattr(config, key, data[key])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "log_level": self.log_level.value,
            "service_name": self.service_name,
            "version": self.version,
            "structured_logs": self.structured_logs,
            "preferences": {
                "default_version": self.preferences.default_version,
                "show_icons": self.preferences.show_icons,
            },
            "reference": {"base_url": self.reference.base_url},
            "data_path": self.data_path,
        }

    def validate(self) -> None:
        """Validate configuration settings."""
        errors = []

        if not self.preferences.default_version.strip():
            errors.append("Default FIX version must not be empty")

        if not self.reference.base_url.startswith(("http://", "https://")):
            errors.append("Reference base URL must be an http(s) URL")

        if self.data_path is not None and not Path(self.data_path).is_dir():
            errors.append(f"Data path is not a directory: {self.data_path}")

        if errors:
            raise ConfigurationException(
                f"Configuration validation failed: {'; '.join(errors)}"
            )


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load_from_env()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    config.validate()
    _config = config


def load_config(config_path: Union[str, Path]) -> Config:
    """Load and set configuration from file."""
    config = Config.load_from_file(config_path)
    set_config(config)
    logger.info(f"Loaded configuration from {config_path}")
    return config
