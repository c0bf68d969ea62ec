"""
Core module for currency display.

Exports the configuration and logging helpers.
"""

from currency_display.core.config import Settings, settings
from currency_display.core.logging import get_logger, setup_logging

__all__ = [
    # Config
    "Settings",
    "settings",
    # Logging
    "get_logger",
    "setup_logging",
]
