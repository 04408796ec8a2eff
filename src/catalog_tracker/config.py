"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    timezone: str = "UTC"
    first_weekday: int = Field(default=0, ge=0, le=6)
    stale_after_days: int = Field(default=30, ge=0)
    top_ranked_limit: int = Field(default=5, ge=1)
    expiring_soon_days: int = Field(default=30, ge=0)
    admin_token: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
