"""Domain value objects package."""

from currency_display.domain.value_objects.amount import (
    Amount,
    AmountInput,
    KeyedAmount,
    ScalarAmount,
    ScalarValue,
    as_amount,
)
from currency_display.domain.value_objects.currency_code import CurrencyCode
from currency_display.domain.value_objects.currency_definition import CurrencyDefinition
from currency_display.domain.value_objects.option import Option

__all__ = [
    "Amount",
    "AmountInput",
    "CurrencyCode",
    "CurrencyDefinition",
    "KeyedAmount",
    "Option",
    "ScalarAmount",
    "ScalarValue",
    "as_amount",
]
