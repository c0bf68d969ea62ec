"""
Currency facade.

Single entry point used by templates and views to render monetary amounts in
the active (or an explicitly requested) currency.
"""

from decimal import localcontext
from typing import Any

from currency_display.application.ports.outbound.currency_provider_port import (
    CurrencyProviderPort,
)
from currency_display.application.ports.outbound.currency_registry_port import (
    CurrencyRegistryPort,
)
from currency_display.domain.exceptions import UnsupportedOperationError
from currency_display.domain.formatters.base import CurrencyFormatter, to_decimal
from currency_display.domain.value_objects.amount import AmountInput, ScalarValue, as_amount
from currency_display.domain.value_objects.currency_code import CurrencyCode
from currency_display.domain.value_objects.option import Option

SELECTED_ATTRIBUTE = ' selected="selected"'

MINOR_UNITS = 100


class CurrencyFacade:
    """
    Resolves currency, formatter and amount for every display call.

    Each call resolves the currency once (explicit argument first, then the
    provider's active currency) and uses that code both to pick the formatter
    and to pick the amount out of a per-currency mapping.
    """

    PASSTHROUGH = frozenset({"get", "set", "is"})

    def __init__(self, provider: CurrencyProviderPort, registry: CurrencyRegistryPort):
        """
        Initialize facade.

        Args:
            provider: Holder of the active currency for this request/session
            registry: Supported currencies and formatter bindings
        """
        self.provider = provider
        self.registry = registry

    # -------------------------------------------------------------------------
    # Resolution pipeline
    # -------------------------------------------------------------------------
    def resolve(self, currency: str | CurrencyCode | None = None) -> CurrencyCode:
        """
        Resolve the currency for a call.

        Args:
            currency: Explicit currency code (any case); overrides the provider

        Returns:
            Canonical currency code
        """
        if currency is None:
            currency = self.provider.get()
        return CurrencyCode(currency)

    def resolve_formatter_type(self, currency: CurrencyCode) -> type[CurrencyFormatter]:
        """
        Look up the formatter type for a resolved currency.

        Raises:
            UnknownCurrencyError: If the registry has no formatter for the code
        """
        return self.registry.get_formatter_type(currency.value)

    def extract_value(self, values: AmountInput, currency: CurrencyCode) -> ScalarValue:
        """
        Pick the amount to format.

        Raises:
            MissingCurrencyKeyError: If a keyed mapping lacks ``currency``
        """
        return as_amount(values).value_for(currency)

    def normalize(self, value: ScalarValue, for_decimal: bool) -> ScalarValue:
        """Convert minor units to major units on the decimal paths only."""
        if for_decimal and self.registry.value_as_integer:
            amount = to_decimal(value)
            # Exact: dividing by 100 only moves the exponent
            with localcontext() as context:
                context.prec = max(context.prec, len(amount.as_tuple().digits) + 2)
                return amount / MINOR_UNITS
        return value

    def _formatter_and_value(
        self,
        values: AmountInput,
        currency: str | CurrencyCode | None,
        for_decimal: bool = True,
    ) -> tuple[CurrencyFormatter, ScalarValue]:
        code = self.resolve(currency)
        formatter_type = self.resolve_formatter_type(code)
        value = self.extract_value(values, code)
        return formatter_type(), self.normalize(value, for_decimal)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def decimal(
        self,
        values: AmountInput,
        currency: str | CurrencyCode | None = None,
        decimal_points: int = 2,
    ) -> str:
        """
        Format as a plain decimal string.

        Args:
            values: Scalar amount or mapping of currency code to amount
            currency: Explicit currency code; defaults to the active currency
            decimal_points: Number of fractional digits

        Returns:
            Decimal string, e.g. ``"2.50"``

        Raises:
            UnknownCurrencyError: If the currency has no formatter
            MissingCurrencyKeyError: If a mapping lacks the resolved currency
        """
        formatter, value = self._formatter_and_value(values, currency)
        return formatter.decimal(value, decimal_points)

    def integer(self, values: AmountInput, currency: str | CurrencyCode | None = None) -> int:
        """
        Return the stored amount as an integer.

        Never divides by 100, so with integer storage this yields the raw
        minor-unit amount.
        """
        formatter, value = self._formatter_and_value(values, currency, for_decimal=False)
        return formatter.integer(value)

    def with_symbol(
        self,
        values: AmountInput,
        currency: str | CurrencyCode | None = None,
        decimal_points: int | None = None,
    ) -> str:
        """Format with the currency symbol; precision defaults per currency."""
        formatter, value = self._formatter_and_value(values, currency)
        return formatter.with_symbol(value, decimal_points)

    def with_code(
        self,
        values: AmountInput,
        currency: str | CurrencyCode | None = None,
        decimal_points: int | None = None,
    ) -> str:
        """Format with the currency code; precision defaults per currency."""
        formatter, value = self._formatter_and_value(values, currency)
        return formatter.with_code(value, decimal_points)

    def with_symbol_and_code(
        self,
        values: AmountInput,
        currency: str | CurrencyCode | None = None,
        decimal_points: int | None = None,
    ) -> str:
        """Format with both symbol and code; precision defaults per currency."""
        formatter, value = self._formatter_and_value(values, currency)
        return formatter.with_symbol_and_code(value, decimal_points)

    # -------------------------------------------------------------------------
    # Currency picker helpers
    # -------------------------------------------------------------------------
    def options(self) -> list[Option]:
        """
        Build picker options for every enabled currency.

        Returns:
            One Option per registry entry, in registry order
        """
        return [
            Option(code=code, formatter=formatter_type())
            for code, formatter_type in self.registry.currencies.items()
        ]

    def selected(self, currency: str) -> str:
        """
        Return the ``selected`` attribute for an ``<option>`` tag.

        The code is not escaped.
        """
        if not self.provider.is_current(currency):
            return ""
        return SELECTED_ATTRIBUTE

    # -------------------------------------------------------------------------
    # Provider passthrough
    # -------------------------------------------------------------------------
    def get(self) -> str:
        """Return the provider's active currency."""
        return self.provider.get()

    def set(self, currency: str) -> None:
        """Change the provider's active currency."""
        self.provider.set(currency)

    def is_current(self, currency: str) -> bool:
        """Check the provider's active currency."""
        return self.provider.is_current(currency)

    def forward(self, name: str, *args: Any) -> Any:
        """
        Forward a call by name to the provider.

        Only ``get``, ``set`` and ``is`` are accepted.

        Raises:
            UnsupportedOperationError: For any other name
        """
        if name not in self.PASSTHROUGH:
            raise UnsupportedOperationError(name)

        if name == "get":
            return self.get(*args)
        if name == "set":
            return self.set(*args)
        return self.is_current(*args)
