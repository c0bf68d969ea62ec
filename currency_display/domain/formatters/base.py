"""Base currency formatter."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import ClassVar

from currency_display.domain.exceptions import InvalidAmountError, InvalidDecimalPointsError
from currency_display.domain.value_objects.amount import ScalarValue
from currency_display.domain.value_objects.currency_definition import CurrencyDefinition


def to_decimal(value: ScalarValue) -> Decimal:
    """
    Convert a scalar amount to :class:`~decimal.Decimal`.

    Floats go through ``str`` so that ``2.5`` becomes ``Decimal("2.5")``
    rather than its binary expansion.

    Raises:
        InvalidAmountError: If the value is not numeric
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(value) from None
    else:
        raise InvalidAmountError(value)

    if not result.is_finite():
        raise InvalidAmountError(value)
    return result


class CurrencyFormatter:
    """
    Renders amounts for a single currency.

    Subclasses only provide ``definition``. Formatters are stateless and cheap
    to construct, so callers create a fresh instance whenever they need one.
    """

    definition: ClassVar[CurrencyDefinition]

    @property
    def code(self) -> str:
        return self.definition.code

    @property
    def symbol(self) -> str:
        return self.definition.symbol

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def decimal_points(self) -> int:
        return self.definition.decimal_points

    def decimal(self, value: ScalarValue, decimal_points: int = 2) -> str:
        """
        Format ``value`` as a plain decimal string.

        Uses ``.`` as the separator, no thousands grouping and exactly
        ``decimal_points`` fractional digits (rounded half up).

        Args:
            value: Amount in major units
            decimal_points: Number of fractional digits

        Returns:
            Decimal string, e.g. ``"2.50"``
        """
        if decimal_points < 0:
            raise InvalidDecimalPointsError(decimal_points)

        amount = to_decimal(value)

        # Room for every integer digit plus the requested fraction
        with localcontext() as context:
            context.prec = max(context.prec, amount.adjusted() + decimal_points + 2)
            exponent = Decimal(1).scaleb(-decimal_points)
            quantized = amount.quantize(exponent, rounding=ROUND_HALF_UP)
        return format(quantized, "f")

    def integer(self, value: ScalarValue) -> int:
        """Round ``value`` half up to a whole number."""
        return int(to_decimal(value).to_integral_value(rounding=ROUND_HALF_UP))

    def with_symbol(self, value: ScalarValue, decimal_points: int | None = None) -> str:
        """Format ``value`` with the currency symbol, e.g. ``"£2.50"``."""
        amount = self.decimal(value, self._points(decimal_points))
        if self.definition.symbol_first:
            return f"{self.symbol}{amount}"
        return f"{amount} {self.symbol}"

    def with_code(self, value: ScalarValue, decimal_points: int | None = None) -> str:
        """Format ``value`` followed by the currency code, e.g. ``"2.50 GBP"``."""
        return f"{self.decimal(value, self._points(decimal_points))} {self.code}"

    def with_symbol_and_code(
        self, value: ScalarValue, decimal_points: int | None = None
    ) -> str:
        """Format ``value`` with both symbol and code, e.g. ``"£2.50 GBP"``."""
        return f"{self.with_symbol(value, decimal_points)} {self.code}"

    def _points(self, decimal_points: int | None) -> int:
        return self.decimal_points if decimal_points is None else decimal_points

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r})"
