"""Unit tests for currency formatters."""

from decimal import Decimal

import pytest

from currency_display.domain.exceptions import InvalidAmountError, InvalidDecimalPointsError
from currency_display.domain.formatters import (
    CHF,
    CNY,
    EUR,
    FORMATTERS,
    GBP,
    JPY,
    SEK,
    USD,
    to_decimal,
)


class TestToDecimal:
    """Test to_decimal() conversion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (250, Decimal("250")),
            (2.5, Decimal("2.5")),
            ("2.50", Decimal("2.50")),
            (" 7 ", Decimal("7")),
            (Decimal("1.1"), Decimal("1.1")),
        ],
    )
    def test_valid_values(self, value, expected):
        """Test numeric values and numeric strings are accepted."""
        assert to_decimal(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", None, True, [1], "NaN", "Infinity"])
    def test_invalid_values_raise_error(self, value):
        """Test non-numeric values raise InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            to_decimal(value)


class TestDecimal:
    """Test CurrencyFormatter.decimal()."""

    def test_default_two_decimal_points(self):
        """Test default precision is 2."""
        assert GBP().decimal(2.5) == "2.50"

    @pytest.mark.parametrize("points", [0, 1, 2, 3, 4])
    def test_exact_fractional_digits(self, points):
        """Test output always has the requested number of fractional digits."""
        result = USD().decimal("1234.5678", points)

        if points == 0:
            assert "." not in result
        else:
            assert len(result.split(".")[1]) == points

    def test_rounds_half_up(self):
        """Test rounding is half up, not banker's rounding."""
        assert USD().decimal("1.005", 2) == "1.01"
        assert USD().decimal("0.125", 2) == "0.13"
        assert USD().decimal(2.5, 0) == "3"

    def test_no_thousands_grouping(self):
        """Test large amounts are not grouped."""
        assert USD().decimal(1234567.891) == "1234567.89"

    def test_negative_amount(self):
        """Test negative amounts keep their sign."""
        assert EUR().decimal(-12.3) == "-12.30"

    def test_large_decimal_points(self):
        """Test precision beyond the default decimal context."""
        assert USD().decimal(1, 30) == "1." + "0" * 30

    def test_large_amount(self):
        """Test amounts with more than 28 integer digits."""
        assert USD().decimal(Decimal("1e27")) == "1" + "0" * 27 + ".00"
        assert (
            USD().decimal("123456789012345678901234567890.125", 2)
            == "123456789012345678901234567890.13"
        )

    def test_negative_decimal_points_raise_error(self):
        """Test negative precision raises InvalidDecimalPointsError."""
        with pytest.raises(InvalidDecimalPointsError):
            USD().decimal(1, -1)


class TestInteger:
    """Test CurrencyFormatter.integer()."""

    def test_integer_passthrough(self):
        """Test whole numbers are returned unchanged."""
        assert USD().integer(250) == 250

    def test_integer_from_string(self):
        """Test numeric strings are parsed."""
        assert USD().integer("250") == 250

    def test_integer_rounds_half_up(self):
        """Test fractional amounts round half up."""
        assert USD().integer("2.5") == 3
        assert USD().integer(Decimal("2.4")) == 2

    def test_integer_invalid_raises_error(self):
        """Test non-numeric input raises InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            USD().integer("two")


class TestDisplayVariants:
    """Test symbol and code rendering."""

    def test_with_symbol(self):
        """Test symbol prefix."""
        assert GBP().with_symbol(2.5) == "£2.50"
        assert USD().with_symbol(2.5) == "$2.50"
        assert EUR().with_symbol(2.5) == "€2.50"

    def test_with_symbol_suffix(self):
        """Test currencies with a trailing symbol."""
        assert SEK().with_symbol(10) == "10.00 kr"
        assert CHF().with_symbol(10) == "10.00 Fr."

    def test_with_symbol_uses_currency_default_precision(self):
        """Test default precision comes from the currency definition."""
        assert JPY().with_symbol(1234.5) == "¥1235"
        assert CNY().with_symbol(1) == "¥1.00"

    def test_with_symbol_explicit_precision(self):
        """Test explicit precision overrides the currency default."""
        assert GBP().with_symbol(2.5, 3) == "£2.500"
        assert JPY().with_symbol(1234.5, 2) == "¥1234.50"

    def test_with_code(self):
        """Test code label suffix."""
        assert GBP().with_code(2.5) == "2.50 GBP"
        assert JPY().with_code(100) == "100 JPY"

    def test_with_symbol_and_code(self):
        """Test symbol and code together."""
        assert GBP().with_symbol_and_code(2.5) == "£2.50 GBP"
        assert SEK().with_symbol_and_code(10) == "10.00 kr SEK"
        assert USD().with_symbol_and_code(2.5, 0) == "$3 USD"


class TestCatalogue:
    """Test the built-in formatter catalogue."""

    def test_catalogue_keys_match_definitions(self):
        """Test every key matches its formatter's own code."""
        for code, formatter in FORMATTERS.items():
            assert formatter().code == code

    def test_catalogue_order(self):
        """Test catalogue order is stable."""
        assert list(FORMATTERS) == ["USD", "GBP", "EUR", "CHF", "JPY", "CNY", "SEK"]

    def test_formatter_metadata(self):
        """Test name and symbol accessors."""
        formatter = GBP()
        assert formatter.name == "Pound Sterling"
        assert formatter.symbol == "£"
        assert formatter.decimal_points == 2
        assert repr(formatter) == "GBP(code='GBP')"
