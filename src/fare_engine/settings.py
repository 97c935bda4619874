from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Engine-wide pricing constants that are not part of a vehicle type."""

    cash_discount_rate: float = Field(
        default=0.035,
        ge=0.0,
        le=1.0,
        description="Share of the subtotal discounted for cash payments",
    )
    cash_discount_fixed: float = Field(
        default=0.15,
        ge=0.0,
        description="Flat amount added to the cash discount",
    )
    fallback_price_per_mile: float = Field(
        default=1.0,
        ge=0.0,
        description="Rate per additional mile when a vehicle type has no distance tiers",
    )
    default_payment_method: Literal["cash", "invoice", "credit_card", "zelle"] = "invoice"

    model_config = SettingsConfigDict(env_prefix="FARE_")


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
