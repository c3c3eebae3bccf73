"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./pingbot.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API used to resolve logins",
        min_length=1,
    )
    github_token: str | None = Field(
        default=None,
        description="Token sent as a bearer credential to the GitHub API",
    )
    team_api_url: str = Field(
        default="https://team-api.infra.rust-lang.org/v1",
        description="Base URL of the team directory that lists team members",
        min_length=1,
    )
    directory_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every directory request",
        gt=0,
    )
    webhook_secret: str | None = Field(
        default=None,
        description="Shared secret used to verify the X-Hub-Signature-256 header",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to store notification timestamps",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
