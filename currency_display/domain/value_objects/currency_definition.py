"""
Currency definition model.

Static description of a currency used by the formatters: code, symbol,
display name and default precision.
"""

from pydantic import BaseModel, Field


class CurrencyDefinition(BaseModel):
    """
    ISO 4217 currency display rules.

    Immutable Pydantic model; formatters hold one as class-level data.
    """

    code: str = Field(min_length=3, max_length=3, description="ISO 4217 currency code")
    symbol: str = Field(min_length=1, description="Currency symbol")
    name: str = Field(min_length=1, description="Full currency name")
    decimal_points: int = Field(default=2, ge=0, description="Default precision")
    symbol_first: bool = Field(default=True, description="Symbol precedes the amount")

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        code: str,
        symbol: str,
        name: str,
        decimal_points: int = 2,
        symbol_first: bool = True,
    ) -> "CurrencyDefinition":
        """
        Factory method for creating currency definitions.

        Args:
            code: ISO 4217 code (converted to uppercase)
            symbol: Currency symbol
            name: Full currency name
            decimal_points: Default number of fractional digits
            symbol_first: Whether the symbol is written before the amount

        Returns:
            CurrencyDefinition instance
        """
        return cls(
            code=code.upper(),
            symbol=symbol,
            name=name,
            decimal_points=decimal_points,
            symbol_first=symbol_first,
        )
