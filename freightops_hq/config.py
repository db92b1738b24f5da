# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from the environment or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(default="sqlite:///./freightops_hq.db")
    secret_key: str = Field(default="change-me-in-production-32-characters")

    session_cookie_name: str = "session"
    session_expiry_days: int = Field(default=7, ge=1)
    session_cookie_secure: bool = False

    # Echo the caller's actual role/permissions back in denial bodies
    expose_denial_details: bool = True

    log_level: str = "INFO"
    cors_origins: list[str] = Field(default=["http://localhost:5173"])


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


settings = get_settings()
