"""
Infrastructure layer configuration.

This package contains:
- The currency registry built from settings
- Dependency injection helpers
"""

from currency_display.infrastructure.config.dependencies import create_currency_facade
from currency_display.infrastructure.config.registry import CurrencyRegistry

__all__ = [
    "CurrencyRegistry",
    "create_currency_facade",
]
