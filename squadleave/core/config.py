"""Application settings via Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from squadleave.shared.constants import DEFAULT_CAPACITY_LIMIT, DEFAULT_CAPACITY_WARNING_LEVEL


class Settings(BaseSettings):
    """Settings loaded from a .env file or environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SQ_",
        extra="ignore",
    )

    # APP
    app_name: str = Field(default="SquadLeave", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # DATABASE
    database_url: str = Field(
        default="sqlite:///./squad_leave.db",
        description="Database URL (SQLite or PostgreSQL)",
    )

    # SCHEDULING RULES
    capacity_limit: int = Field(
        default=DEFAULT_CAPACITY_LIMIT,
        ge=1,
        description="Max simultaneous vacations per specialty per day",
    )
    capacity_warning_level: int = Field(
        default=DEFAULT_CAPACITY_WARNING_LEVEL,
        ge=1,
        description="Vacation count at which the heatmap shows 'attention'",
    )
    message_language: Literal["pt", "en"] = Field(
        default="pt",
        description="Language for default rejection messages",
    )

    # SECURITY
    secret_key: str = Field(
        default="change-me-in-production-use-secrets-manager",
        description="Secret key for JWT tokens",
    )
    access_token_expire_minutes: int = Field(
        default=8 * 60,
        description="JWT lifetime in minutes",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_whitelist: list[str] = Field(
        default_factory=list,
        description="E-mails allowed to manage employees, requests and holidays",
    )
    admin_password_hash: str = Field(
        default="",
        description="bcrypt hash of the managers' password",
    )
    master_password: str = Field(
        default="",
        description="Legacy shared password for whitelisted e-mails, empty disables it",
    )

    # WEB SERVER
    host: str = Field(default="127.0.0.1", description="FastAPI host")
    port: int = Field(default=8000, description="FastAPI port")
    reload: bool = Field(default=False, description="Reload on code changes")

    # LOGGING
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Returns the cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()
