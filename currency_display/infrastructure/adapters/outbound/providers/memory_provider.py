"""In-memory currency provider."""

from currency_display.core.logging import get_logger
from currency_display.domain.value_objects.currency_code import CurrencyCode
from currency_display.infrastructure.adapters.outbound.providers.base import (
    BaseCurrencyProvider,
)

logger = get_logger(__name__)


class InMemoryCurrencyProvider(BaseCurrencyProvider):
    """Keeps the selection on the instance; create one per request or session."""

    def __init__(self, default: str):
        super().__init__(default)
        self._current: str | None = None

    def get(self) -> str:
        return self._current or self.default

    def set(self, currency: str) -> None:
        self._current = CurrencyCode(currency).value
        logger.debug(f"Active currency set to {self._current}")
