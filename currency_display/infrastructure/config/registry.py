"""
Currency registry.

Binds enabled currency codes to formatter classes and carries the
integer-storage flag.
"""

from collections.abc import Mapping

from currency_display.core.config import Settings, settings as default_settings
from currency_display.core.logging import get_logger
from currency_display.domain.exceptions import CurrencyBindingError, UnknownCurrencyError
from currency_display.domain.formatters import FORMATTERS, CurrencyFormatter
from currency_display.domain.value_objects.currency_code import CurrencyCode

logger = get_logger(__name__)


class CurrencyRegistry:
    """
    Static lookup from currency code to formatter type.

    Immutable after construction; one instance can be shared by every
    facade in the process.
    """

    def __init__(
        self,
        formatters: Mapping[str, type[CurrencyFormatter]],
        value_as_integer: bool = False,
    ):
        """
        Initialize registry.

        Args:
            formatters: Code to formatter type, in display order
            value_as_integer: Stored amounts are minor units

        Raises:
            CurrencyBindingError: If a code is bound to another currency's formatter
        """
        self._formatters: dict[str, type[CurrencyFormatter]] = {}
        for code, formatter in formatters.items():
            key = CurrencyCode(code).value
            if formatter.definition.code != key:
                raise CurrencyBindingError(key, formatter.definition.code)
            self._formatters[key] = formatter
        self._value_as_integer = value_as_integer

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CurrencyRegistry":
        """
        Build a registry for the currencies enabled in settings.

        Args:
            settings: Settings to read; defaults to the module-level instance

        Returns:
            CurrencyRegistry with the enabled built-in formatters

        Raises:
            UnknownCurrencyError: If an enabled code has no built-in formatter
        """
        settings = settings or default_settings

        formatters: dict[str, type[CurrencyFormatter]] = {}
        for code in settings.currencies:
            if code not in FORMATTERS:
                raise UnknownCurrencyError(code)
            formatters[code] = FORMATTERS[code]

        logger.debug(
            f"Currency registry built: currencies={list(formatters)}, "
            f"value_as_integer={settings.value_as_integer}"
        )
        return cls(formatters, value_as_integer=settings.value_as_integer)

    @property
    def value_as_integer(self) -> bool:
        return self._value_as_integer

    @property
    def currencies(self) -> dict[str, type[CurrencyFormatter]]:
        """Copy of the bindings to prevent external modification."""
        return dict(self._formatters)

    def get_formatter_type(self, currency: str) -> type[CurrencyFormatter]:
        """
        Get formatter type by currency code (case-insensitive).

        Raises:
            UnknownCurrencyError: If the code is not registered
        """
        try:
            return self._formatters[CurrencyCode(currency).value]
        except KeyError:
            raise UnknownCurrencyError(currency) from None
