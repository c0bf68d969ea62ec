"""Currency provider adapters."""

from currency_display.infrastructure.adapters.outbound.providers.base import (
    BaseCurrencyProvider,
)
from currency_display.infrastructure.adapters.outbound.providers.memory_provider import (
    InMemoryCurrencyProvider,
)
from currency_display.infrastructure.adapters.outbound.providers.session_provider import (
    SessionCurrencyProvider,
)

__all__ = [
    "BaseCurrencyProvider",
    "InMemoryCurrencyProvider",
    "SessionCurrencyProvider",
]
