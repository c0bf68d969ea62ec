"""Amount input variants."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Union

from currency_display.domain.exceptions import MissingCurrencyKeyError
from currency_display.domain.value_objects.currency_code import CurrencyCode

ScalarValue = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class ScalarAmount:
    """A single amount that applies whatever the currency."""

    value: ScalarValue

    def value_for(self, currency: CurrencyCode) -> ScalarValue:
        return self.value


@dataclass(frozen=True)
class KeyedAmount:
    """
    Amounts supplied per currency.

    Keys are canonicalized on construction, so ``{"usd": 100}`` and
    ``{"USD": 100}`` are equivalent.
    """

    values: Mapping[str, ScalarValue]

    def __post_init__(self) -> None:
        normalized = {
            CurrencyCode(key).value: value for key, value in self.values.items()
        }
        object.__setattr__(self, "values", MappingProxyType(normalized))

    def value_for(self, currency: CurrencyCode) -> ScalarValue:
        """
        Return the amount stored for ``currency``.

        Raises:
            MissingCurrencyKeyError: If no amount was supplied for the currency
        """
        try:
            return self.values[currency.value]
        except KeyError:
            raise MissingCurrencyKeyError(currency.value, self.values.keys()) from None


Amount = Union[ScalarAmount, KeyedAmount]

AmountInput = Union[Amount, Mapping[str, ScalarValue], ScalarValue]


def as_amount(values: AmountInput) -> Amount:
    """
    Wrap raw caller input in the matching amount variant.

    Args:
        values: A scalar, a currency-keyed mapping or an existing variant

    Returns:
        ScalarAmount or KeyedAmount
    """
    if isinstance(values, (ScalarAmount, KeyedAmount)):
        return values
    if isinstance(values, Mapping):
        return KeyedAmount(values)
    return ScalarAmount(values)
