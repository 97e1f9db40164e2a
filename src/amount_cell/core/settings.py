"""Application settings loaded from environment variables."""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from amount_cell.domain.currency import Currency, coerce_currency_code


class Settings(BaseSettings):
    """Runtime settings for amount fields built outside of code."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    currency: Currency = Field(default=Currency.RUR, alias="AMOUNT_CELL_CURRENCY")
    default_amount: Decimal | None = Field(
        default=None,
        alias="AMOUNT_CELL_DEFAULT_AMOUNT",
        ge=0,
    )
    decimal_separator: str = Field(
        default=".",
        alias="AMOUNT_CELL_DECIMAL_SEPARATOR",
        min_length=1,
        max_length=1,
    )
    log_level: str = Field(default="WARNING", alias="AMOUNT_CELL_LOG_LEVEL")

    @field_validator("currency", mode="before")
    @classmethod
    def _resolve_currency_code(cls, value: object) -> object:
        return coerce_currency_code(value)

    @field_validator("decimal_separator")
    @classmethod
    def _reject_grouping_separator(cls, value: str) -> str:
        if value.isspace() or value.isdigit():
            msg = "Decimal separator must not be whitespace or a digit."
            raise ValueError(msg)
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
