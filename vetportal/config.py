"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    backend_api_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the clinic REST backend",
        min_length=1,
    )
    admin_api_url: str = Field(
        default="http://localhost:8000/api/admin",
        description="Base URL of the administrative endpoints of the clinic backend",
        min_length=1,
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every outgoing backend request",
        gt=0,
    )
    database_url: str = Field(
        default="sqlite:///./vetportal.db",
        description="Database URL used by SQLAlchemy for the portal key-value store",
        min_length=1,
    )
    secret_key: str | None = Field(
        default=None,
        description="Secret used to verify session tokens issued by the auth service",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    app_timezone: str = Field(
        default="UTC", description="Timezone used to compute the clinic calendar day"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    default_page_size: int = Field(
        default=10, description="Items per page when the caller does not ask", gt=0
    )
    page_window_size: int = Field(
        default=5, description="Number of page links returned around the current page", gt=0
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Browser origins allowed to call the portal",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
