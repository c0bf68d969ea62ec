"""
Core configuration module using Pydantic Settings.

This module defines the display settings loaded from environment variables
(prefixed with ``CURRENCY_``) or a ``.env`` file.
"""

from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Currency display settings.

    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_prefix="CURRENCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Currency Settings
    # -------------------------------------------------------------------------
    default_currency: str = Field(
        default="GBP",
        min_length=1,
        description="Active currency when the provider holds no selection",
    )
    currencies: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["GBP", "USD", "EUR"],
        description="Enabled currency codes, in picker order (comma-separated in env)",
    )
    value_as_integer: bool = Field(
        default=False,
        description="Stored amounts are minor units (e.g. cents)",
    )
    session_key: str = Field(default="currency", min_length=1)

    @field_validator("default_currency")
    @classmethod
    def uppercase_default(cls, v: str) -> str:
        """Canonicalize the default currency code."""
        return v.strip().upper()

    @field_validator("currencies", mode="before")
    @classmethod
    def parse_currencies(cls, v: str | list[str]) -> list[str]:
        """Parse comma-separated currency codes into an uppercase list."""
        if isinstance(v, str):
            v = v.split(",")
        return [code.strip().upper() for code in v if code.strip()]

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")


# Singleton instance of settings
# Import this instance throughout the application
settings = Settings()
