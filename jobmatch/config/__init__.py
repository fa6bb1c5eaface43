"""Configuration management module for the job/resume keyword matcher."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    CatalogConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    MatchingConfig,
    ValidationConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "MatchingConfig",
    "CatalogConfig",
    "ValidationConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
