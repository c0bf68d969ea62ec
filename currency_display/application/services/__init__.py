"""Application services."""

from currency_display.application.services.currency_facade import CurrencyFacade

__all__ = ["CurrencyFacade"]
