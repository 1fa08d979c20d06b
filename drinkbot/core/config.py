"""
Configuration management for the drink order bot.

Settings are read from the environment (and an optional `.env` file) with
Pydantic's `BaseSettings`. The bot token is the only required value; without
it the service has no way to talk to Slack and refuses to start.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import Field, PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings

from drinkbot.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    # General application settings
    API_TITLE: str = "Drink Order Bot"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    HOST: str = "0.0.0.0"
    PORT: PositiveInt = 8080

    # Slack
    SLACK_BOT_TOKEN: str

    # Ordering flow
    ORDER_FLOW: str = Field("catalog", pattern=r"^(catalog|shop_select)$")
    SHOP_CATALOG: Optional[Dict[str, List[str]]] = None

    # Monitoring / tracing
    ENABLE_TRACING: bool = False
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("SLACK_BOT_TOKEN")
    def _require_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("SLACK_BOT_TOKEN is not set")
        return value.strip()

    @field_validator("LOG_LEVEL", mode="before")
    def _upper_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance, failing loudly when the token is absent."""

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
