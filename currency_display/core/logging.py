"""
Logging configuration module.

This module provides logging configuration with support for:
- Console logging with a detailed formatter (development)
- JSON logging (for log aggregation)
"""

import logging
import logging.config
import sys
from typing import Any

from currency_display.core.config import Settings, settings as default_settings


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure package logging based on settings.

    Call this once at application startup, before any logging occurs.
    Libraries embedding the package may skip it and configure logging
    themselves.

    Args:
        settings: Settings to read; defaults to the module-level instance
    """
    settings = settings or default_settings

    logging.config.dictConfig(get_logging_config(settings))

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}"
    )


def get_logging_config(settings: Settings | None = None) -> dict[str, Any]:
    """
    Get logging configuration dictionary.

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    settings = settings or default_settings

    formatter = "json" if settings.log_format == "json" else "detailed"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": (
                    "%(asctime)s %(name)s %(levelname)s %(filename)s "
                    "%(lineno)d %(funcName)s %(message)s"
                ),
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": formatter,
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "currency_display": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the module

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Currency changed")
    """
    return logging.getLogger(name)
