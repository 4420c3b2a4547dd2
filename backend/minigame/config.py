"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every endpoint (database, AuthGate, public site) comes from the environment
    - get_settings() is cached (lru_cache): single instance per process
    - Numeric knobs are range-checked at startup, not at first use

Design Decisions:
    - Defaults match the docker-compose service names, so a bare `up` works
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_NAME = "production-minigame-service"
SERVICE_VERSION = (0, 1, 0)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    database_url: str = "postgresql+asyncpg://minigame:minigame@db:5432/minigame"
    database_pool_size: int = Field(default=20, ge=1)
    database_max_overflow: int = Field(default=10, ge=0)
    db_connect_retry_seconds: float = Field(default=5.0, gt=0)

    # AuthGate
    auth_service_url: str = "http://auth-service:8080"
    auth_service_timeout_seconds: float = Field(default=10, gt=0)

    # Public surface
    site_external_url: str = "http://localhost:3000"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v: str) -> str:
        """postgresql:// (as most hosts hand it out) -> postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return "postgresql+asyncpg://" + v[len("postgresql://"):]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
