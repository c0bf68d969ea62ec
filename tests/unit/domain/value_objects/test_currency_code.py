"""Unit tests for CurrencyCode value object."""

import pytest

from currency_display.domain.exceptions import UnknownCurrencyError
from currency_display.domain.value_objects.currency_code import CurrencyCode


class TestCurrencyCode:
    """Test CurrencyCode canonicalization."""

    def test_uppercases_code(self):
        """Test lowercase input is uppercased."""
        assert CurrencyCode("usd").value == "USD"

    def test_strips_whitespace(self):
        """Test surrounding whitespace is removed."""
        assert CurrencyCode("  gbp ").value == "GBP"

    def test_str_returns_value(self):
        """Test __str__ returns the code."""
        assert str(CurrencyCode("eur")) == "EUR"

    def test_equality_is_case_insensitive(self):
        """Test codes compare equal after canonicalization."""
        assert CurrencyCode("usd") == CurrencyCode("USD")

    def test_accepts_existing_code(self):
        """Test wrapping a CurrencyCode yields the same value."""
        assert CurrencyCode(CurrencyCode("usd")).value == "USD"

    def test_empty_code_raises_error(self):
        """Test empty code raises UnknownCurrencyError."""
        with pytest.raises(UnknownCurrencyError):
            CurrencyCode("   ")

    def test_is_frozen(self):
        """Test CurrencyCode is immutable."""
        code = CurrencyCode("USD")
        with pytest.raises(AttributeError):
            code.value = "EUR"  # type: ignore[misc]
