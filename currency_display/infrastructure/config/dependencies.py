"""
Dependency injection helpers for the currency facade.

Usage in a web view:
    provider = SessionCurrencyProvider(
        request.session, default=settings.default_currency, key=settings.session_key
    )
    currency = create_currency_facade(provider)

    currency.with_symbol(product.prices)
"""

from currency_display.application.ports.outbound.currency_provider_port import (
    CurrencyProviderPort,
)
from currency_display.application.services.currency_facade import CurrencyFacade
from currency_display.core.config import Settings, settings as default_settings
from currency_display.infrastructure.adapters.outbound.providers.memory_provider import (
    InMemoryCurrencyProvider,
)
from currency_display.infrastructure.config.registry import CurrencyRegistry


def create_currency_facade(
    provider: CurrencyProviderPort | None = None,
    settings: Settings | None = None,
    registry: CurrencyRegistry | None = None,
) -> CurrencyFacade:
    """
    Wire a CurrencyFacade.

    Args:
        provider: Active currency holder; a fresh in-memory provider at the
            default currency is created when omitted
        settings: Settings to read; defaults to the module-level instance
        registry: Prebuilt registry; built from settings when omitted

    Returns:
        CurrencyFacade instance
    """
    settings = settings or default_settings
    if registry is None:
        registry = CurrencyRegistry.from_settings(settings)
    if provider is None:
        provider = InMemoryCurrencyProvider(default=settings.default_currency)
    return CurrencyFacade(provider=provider, registry=registry)
