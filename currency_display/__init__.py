"""Currency-aware formatting of monetary amounts for display."""

from currency_display.application.services.currency_facade import CurrencyFacade
from currency_display.core.config import Settings, settings
from currency_display.domain.exceptions import (
    CurrencyBindingError,
    CurrencyDomainException,
    DomainException,
    InvalidAmountError,
    InvalidDecimalPointsError,
    MissingCurrencyKeyError,
    UnknownCurrencyError,
    UnsupportedOperationError,
)
from currency_display.domain.formatters import FORMATTERS, CurrencyFormatter
from currency_display.domain.value_objects import (
    CurrencyCode,
    CurrencyDefinition,
    KeyedAmount,
    Option,
    ScalarAmount,
)
from currency_display.infrastructure.adapters.outbound.providers import (
    BaseCurrencyProvider,
    InMemoryCurrencyProvider,
    SessionCurrencyProvider,
)
from currency_display.infrastructure.config import CurrencyRegistry, create_currency_facade

__all__ = [
    "BaseCurrencyProvider",
    "CurrencyBindingError",
    "CurrencyCode",
    "CurrencyDefinition",
    "CurrencyDomainException",
    "CurrencyFacade",
    "CurrencyFormatter",
    "CurrencyRegistry",
    "DomainException",
    "FORMATTERS",
    "InMemoryCurrencyProvider",
    "InvalidAmountError",
    "InvalidDecimalPointsError",
    "KeyedAmount",
    "MissingCurrencyKeyError",
    "Option",
    "ScalarAmount",
    "SessionCurrencyProvider",
    "Settings",
    "UnknownCurrencyError",
    "UnsupportedOperationError",
    "create_currency_facade",
    "settings",
]
