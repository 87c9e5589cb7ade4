"""API configuration via environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    database_url: str = "postgresql+asyncpg://localhost:5432/flights"
    database_echo: bool = False
    # "memory" keeps flights in process; nothing survives a restart.
    storage_backend: Literal["sql", "memory"] = "sql"
    create_tables: bool = True
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # uvicorn bind address for `flight-api serve`
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="FLIGHT_API_", env_file=".env", extra="ignore"
    )


settings = ApiSettings()
