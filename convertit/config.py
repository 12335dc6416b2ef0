"""Widget configuration, read from CONVERTIT_* environment variables or a .env file."""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_RATES_URL = "https://api.exchangerate-api.com/v4/latest/USD"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CONVERTIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    rates_url: str = Field(default=DEFAULT_RATES_URL, description="Base-USD rate endpoint")
    request_timeout: float = Field(default=10.0, gt=0, description="Seconds to wait for the rate service")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    default_from: str = Field(default="USD", pattern=r"^[A-Z]{3}$")
    default_to: str = Field(default="EUR", pattern=r"^[A-Z]{3}$")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


@lru_cache()
def get_settings() -> Settings:
    return Settings()
