"""Currency provider port interface."""

from typing import Protocol


class CurrencyProviderPort(Protocol):
    """Holder of the active currency for one request or session."""

    def get(self) -> str:
        """
        Return the active currency code.

        Returns:
            Uppercase currency code
        """
        ...

    def set(self, currency: str) -> None:
        """
        Make ``currency`` the active currency.

        Args:
            currency: Currency code (any case)
        """
        ...

    def is_current(self, currency: str) -> bool:
        """
        Check whether ``currency`` is the active currency.

        Args:
            currency: Currency code (any case)

        Returns:
            True if it matches the active currency, False otherwise
        """
        ...
