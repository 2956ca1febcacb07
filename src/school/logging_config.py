"""structlog setup for the CLI.

Log lines go to stderr so they never interleave with menu output.
"""

from __future__ import annotations

import logging
import sys

import structlog

from school.config.app_config import ConfigError

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: str = "WARNING") -> None:
    """Configure structlog with a minimum level.

    Raises:
        ConfigError: If level is not a known level name
    """
    try:
        min_level = _LEVELS[level.upper()]
    except KeyError:
        raise ConfigError(
            f"Unknown log level '{level}'. Use one of: {', '.join(_LEVELS)}"
        ) from None

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
