"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

StorageBackend = Literal["memory", "supabase", "json"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: StorageBackend = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    data_file: Path = Path("foodtopia_data.json")
    seed_sample_data: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
