"""Base currency provider."""

from abc import ABC, abstractmethod

from currency_display.domain.value_objects.currency_code import CurrencyCode


class BaseCurrencyProvider(ABC):
    """
    Common behaviour for providers of the active currency.

    Subclasses decide where the selection lives; this base handles the
    default and case-insensitive comparison.
    """

    def __init__(self, default: str):
        """
        Initialize provider.

        Args:
            default: Currency returned while nothing has been selected
        """
        self.default = CurrencyCode(default).value

    @abstractmethod
    def get(self) -> str:
        """Return the active currency code."""

    @abstractmethod
    def set(self, currency: str) -> None:
        """Store ``currency`` as the active currency."""

    def is_current(self, currency: str) -> bool:
        return CurrencyCode(currency).value == self.get()
