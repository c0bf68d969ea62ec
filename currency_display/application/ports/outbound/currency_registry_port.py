"""Currency registry port interface."""

from collections.abc import Mapping
from typing import Protocol

from currency_display.domain.formatters.base import CurrencyFormatter


class CurrencyRegistryPort(Protocol):
    """Static configuration of supported currencies and their formatters."""

    @property
    def value_as_integer(self) -> bool:
        """Whether stored amounts are minor units (value x 100)."""
        ...

    @property
    def currencies(self) -> Mapping[str, type[CurrencyFormatter]]:
        """Enabled currencies, code to formatter type, in display order."""
        ...

    def get_formatter_type(self, currency: str) -> type[CurrencyFormatter]:
        """
        Look up the formatter type bound to ``currency``.

        Args:
            currency: Uppercase currency code

        Returns:
            Formatter class

        Raises:
            UnknownCurrencyError: If no formatter is registered for the code
        """
        ...
