"""Currency code value object."""

from dataclasses import dataclass

from currency_display.domain.exceptions import UnknownCurrencyError


@dataclass(frozen=True)
class CurrencyCode:
    """
    Canonical currency identifier.

    Input is case-insensitive; the stored value is always stripped and
    uppercased so it can be used directly for registry and mapping lookups.
    """

    value: str

    def __post_init__(self) -> None:
        """Canonicalize the code."""
        normalized = str(self.value).strip().upper()

        if not normalized:
            raise UnknownCurrencyError(str(self.value))

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"CurrencyCode({self.value!r})"
