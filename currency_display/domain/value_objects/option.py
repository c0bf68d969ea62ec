"""Currency picker option value object."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from currency_display.domain.formatters.base import CurrencyFormatter


@dataclass(frozen=True)
class Option:
    """One selectable entry of a currency picker."""

    code: str
    formatter: "CurrencyFormatter"

    @property
    def symbol(self) -> str:
        return self.formatter.symbol

    @property
    def name(self) -> str:
        return self.formatter.name

    def __str__(self) -> str:
        return self.code
