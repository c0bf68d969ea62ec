"""Outbound ports (driven adapters interfaces)."""

from currency_display.application.ports.outbound.currency_provider_port import (
    CurrencyProviderPort,
)
from currency_display.application.ports.outbound.currency_registry_port import (
    CurrencyRegistryPort,
)

__all__ = [
    "CurrencyProviderPort",
    "CurrencyRegistryPort",
]
