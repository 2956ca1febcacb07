"""Application configuration loader.

Loads configuration from config/school_config_v1.yaml, falling back to
built-in defaults when the file is absent or a key is missing.

Usage:
    from school.config.app_config import load_app_config

    config = load_app_config()
    db_path = config.database.path
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to working directory)
CONFIG_FILE = Path("config/school_config_v1.yaml")


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""


@dataclass
class DatabaseConfig:
    """Configuration for the SQLite database."""

    path: str = "school.db"
    foreign_keys: bool = False
    reset_students_on_start: bool = True


@dataclass
class LoggingConfig:
    """Configuration for structlog output."""

    level: str = "WARNING"


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {
            "path": "school.db",
            "foreign_keys": False,
            "reset_students_on_start": True,
        },
        "logging": {
            "level": "WARNING",
        },
    }


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Merge a config section over its defaults.

    Raises:
        ConfigError: If the section is present but not a mapping.
    """
    section = data.get(name)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return {**_get_defaults()[name], **section}


def _typed(section: str, key: str, value: Any, expected: type) -> Any:
    """Return value if it has the expected type, else raise ConfigError."""
    # A quoted "false" is a str, not a bool
    if not isinstance(value, expected):
        raise ConfigError(
            f"Config key '{section}.{key}' must be {expected.__name__}, "
            f"got {type(value).__name__}: {value!r}"
        )
    return value


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object.

    Raises:
        ConfigError: If a section is not a mapping or a value has the wrong type.
    """
    db_data = _section(data, "database")
    database = DatabaseConfig(
        path=_typed("database", "path", db_data["path"], str),
        foreign_keys=_typed("database", "foreign_keys", db_data["foreign_keys"], bool),
        reset_students_on_start=_typed(
            "database",
            "reset_students_on_start",
            db_data["reset_students_on_start"],
            bool,
        ),
    )

    log_data = _section(data, "logging")
    logging_config = LoggingConfig(
        level=_typed("logging", "level", log_data["level"], str)
    )

    return AppConfig(database=database, logging=logging_config)


def load_app_config(
    force_reload: bool = False, config_file: Path | None = None
) -> AppConfig:
    """Load application config, using defaults if no file exists.

    Args:
        force_reload: If True, ignore cached config and reload from file.
        config_file: Alternative config file. Defaults to CONFIG_FILE.

    Returns:
        AppConfig object with all settings.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    path = config_file or CONFIG_FILE
    data: dict[str, Any]

    if path.exists():
        logger.debug("loading_app_config", source=str(path))
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        data = loaded
    else:
        logger.debug("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
