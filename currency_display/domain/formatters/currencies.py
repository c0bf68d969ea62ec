"""Built-in currency formatters."""

from currency_display.domain.formatters.base import CurrencyFormatter
from currency_display.domain.value_objects.currency_definition import CurrencyDefinition


class USD(CurrencyFormatter):
    definition = CurrencyDefinition.create("USD", "$", "US Dollar")


class GBP(CurrencyFormatter):
    definition = CurrencyDefinition.create("GBP", "£", "Pound Sterling")


class EUR(CurrencyFormatter):
    definition = CurrencyDefinition.create("EUR", "€", "Euro")


class CHF(CurrencyFormatter):
    definition = CurrencyDefinition.create("CHF", "Fr.", "Swiss Franc", symbol_first=False)


class JPY(CurrencyFormatter):
    definition = CurrencyDefinition.create("JPY", "¥", "Japanese Yen", decimal_points=0)


class CNY(CurrencyFormatter):
    definition = CurrencyDefinition.create("CNY", "¥", "Chinese Yuan")


class SEK(CurrencyFormatter):
    definition = CurrencyDefinition.create("SEK", "kr", "Swedish Krona", symbol_first=False)


# Catalogue of every formatter shipped with the package, in display order
FORMATTERS: dict[str, type[CurrencyFormatter]] = {
    formatter.definition.code: formatter
    for formatter in (USD, GBP, EUR, CHF, JPY, CNY, SEK)
}
