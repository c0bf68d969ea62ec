"""Session-backed currency provider."""

from collections.abc import MutableMapping
from typing import Any

from currency_display.core.logging import get_logger
from currency_display.domain.value_objects.currency_code import CurrencyCode
from currency_display.infrastructure.adapters.outbound.providers.base import (
    BaseCurrencyProvider,
)

logger = get_logger(__name__)


class SessionCurrencyProvider(BaseCurrencyProvider):
    """
    Stores the active currency in a session mapping.

    Any mutable mapping works, e.g. ``request.session`` from Starlette's
    SessionMiddleware or a plain dict in tests.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        default: str,
        key: str = "currency",
    ):
        """
        Initialize provider.

        Args:
            session: Session storage for the current user
            default: Currency returned when the session holds none
            key: Session key holding the currency code
        """
        super().__init__(default)
        self.session = session
        self.key = key

    def get(self) -> str:
        stored = self.session.get(self.key)
        if not stored:
            return self.default
        return CurrencyCode(stored).value

    def set(self, currency: str) -> None:
        code = CurrencyCode(currency).value
        self.session[self.key] = code
        logger.debug(f"Active currency set to {code} (session key={self.key!r})")
