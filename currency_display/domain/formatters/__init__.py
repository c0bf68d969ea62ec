"""Currency formatters package."""

from currency_display.domain.formatters.base import CurrencyFormatter, to_decimal
from currency_display.domain.formatters.currencies import (
    CHF,
    CNY,
    EUR,
    FORMATTERS,
    GBP,
    JPY,
    SEK,
    USD,
)

__all__ = [
    "CurrencyFormatter",
    "FORMATTERS",
    "to_decimal",
    "CHF",
    "CNY",
    "EUR",
    "GBP",
    "JPY",
    "SEK",
    "USD",
]
