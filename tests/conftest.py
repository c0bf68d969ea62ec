"""
Pytest configuration and fixtures for currency display tests.

This module provides:
- Settings isolated from the environment and any .env file
- Registry, provider and facade fixtures
"""

import pytest

from currency_display.application.services.currency_facade import CurrencyFacade
from currency_display.core.config import Settings
from currency_display.domain.formatters import EUR, GBP, USD
from currency_display.infrastructure.adapters.outbound.providers import (
    InMemoryCurrencyProvider,
)
from currency_display.infrastructure.config.registry import CurrencyRegistry


# ============================================================================
# Settings Fixtures
# ============================================================================
@pytest.fixture
def make_settings():
    """Build Settings that ignore .env files."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


# ============================================================================
# Registry / Provider Fixtures
# ============================================================================
@pytest.fixture
def registry():
    """Registry with GBP, USD and EUR storing decimal amounts."""
    return CurrencyRegistry({"GBP": GBP, "USD": USD, "EUR": EUR})


@pytest.fixture
def integer_registry():
    """Registry with GBP, USD and EUR storing minor units."""
    return CurrencyRegistry({"GBP": GBP, "USD": USD, "EUR": EUR}, value_as_integer=True)


@pytest.fixture
def provider():
    """In-memory provider defaulting to GBP."""
    return InMemoryCurrencyProvider(default="GBP")


# ============================================================================
# Facade Fixtures
# ============================================================================
@pytest.fixture
def facade(provider, registry):
    """Facade over decimal amounts."""
    return CurrencyFacade(provider=provider, registry=registry)


@pytest.fixture
def integer_facade(provider, integer_registry):
    """Facade over minor-unit amounts."""
    return CurrencyFacade(provider=provider, registry=integer_registry)
