"""Domain exceptions package."""

from currency_display.domain.exceptions.base import DomainException
from currency_display.domain.exceptions.currency_exceptions import (
    CurrencyBindingError,
    CurrencyDomainException,
    InvalidAmountError,
    InvalidDecimalPointsError,
    MissingCurrencyKeyError,
    UnknownCurrencyError,
    UnsupportedOperationError,
)

__all__ = [
    # Base
    "DomainException",
    # Currency exceptions
    "CurrencyBindingError",
    "CurrencyDomainException",
    "InvalidAmountError",
    "InvalidDecimalPointsError",
    "MissingCurrencyKeyError",
    "UnknownCurrencyError",
    "UnsupportedOperationError",
]
