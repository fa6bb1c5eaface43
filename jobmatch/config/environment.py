"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

DEFAULT_DATABASE_URL = "sqlite:///./data/jobmatch.db"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        database_url: Optional[str] = None,
        data_dir: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.log_level = log_level
        self.database_url = database_url or DEFAULT_DATABASE_URL
        self.data_dir = data_dir
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - DATABASE_URL: SQLAlchemy URL for stored analyses
      (default: sqlite:///./data/jobmatch.db)
    - JOBMATCH_DATA_DIR: Catalog directory (overrides catalog.data_dir)
    - ENVIRONMENT: Environment label added to every log record

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    database_url = os.getenv("DATABASE_URL")
    data_dir = os.getenv("JOBMATCH_DATA_DIR")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if database_url is not None and "://" not in database_url:
        errors.append(
            f"Invalid DATABASE_URL: '{database_url}'. Expected a URL like {DEFAULT_DATABASE_URL}"
        )

    if data_dir is not None and not data_dir.strip():
        errors.append("JOBMATCH_DATA_DIR is set but empty")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level,
        database_url=database_url,
        data_dir=data_dir.strip() if data_dir else None,
        environment=environment,
    )
