"""Configuration package for the school registry."""

from school.config.app_config import (
    AppConfig,
    ConfigError,
    DatabaseConfig,
    LoggingConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "ConfigError",
    "DatabaseConfig",
    "LoggingConfig",
    "clear_config_cache",
    "load_app_config",
]
