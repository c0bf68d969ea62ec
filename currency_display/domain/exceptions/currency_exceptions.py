"""Currency domain exceptions."""

from collections.abc import Iterable

from currency_display.domain.exceptions.base import DomainException


class CurrencyDomainException(DomainException):
    """Base exception for currency-related domain errors."""


class UnknownCurrencyError(CurrencyDomainException):
    """Raised when a currency code has no registered formatter."""

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(
            message=f"Unknown currency: {currency!r}",
            code="UNKNOWN_CURRENCY"
        )


class MissingCurrencyKeyError(CurrencyDomainException):
    """Raised when a per-currency amount mapping lacks the resolved code."""

    def __init__(self, currency: str, available: Iterable[str] = ()):
        self.currency = currency
        self.available = tuple(available)
        super().__init__(
            message=(
                f"No amount supplied for currency {currency}. "
                f"Available: {', '.join(self.available) or 'none'}"
            ),
            code="MISSING_CURRENCY_KEY"
        )


class UnsupportedOperationError(CurrencyDomainException):
    """Raised when a provider passthrough is requested for an unknown method."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            message=f"Method {name} is not available on the currency provider",
            code="UNSUPPORTED_OPERATION"
        )


class InvalidAmountError(CurrencyDomainException):
    """Raised when an amount cannot be interpreted as a number."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            message=f"Invalid amount value: {value!r}",
            code="INVALID_AMOUNT"
        )


class InvalidDecimalPointsError(CurrencyDomainException):
    """Raised when a negative number of decimal points is requested."""

    def __init__(self, decimal_points: int):
        self.decimal_points = decimal_points
        super().__init__(
            message=f"Decimal points must be zero or greater, got {decimal_points}",
            code="INVALID_DECIMAL_POINTS"
        )


class CurrencyBindingError(CurrencyDomainException):
    """Raised when a currency code is bound to another currency's formatter."""

    def __init__(self, currency: str, formatter_currency: str):
        self.currency = currency
        self.formatter_currency = formatter_currency
        super().__init__(
            message=(
                f"Currency {currency} is bound to the {formatter_currency} formatter"
            ),
            code="CURRENCY_BINDING_MISMATCH"
        )
