"""Harness settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Titanic harness configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TITANIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Target deployment
    base_url: str = Field(
        default="http://localhost:8000", description="Gateway base URL of the backend"
    )
    request_timeout: float = Field(
        default=10.0, gt=0, description="Per-request timeout in seconds"
    )

    # Reporting
    results_dir: Path = Field(
        default=Path("harness-results"), description="Directory for run reports"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")

    # Actors
    actor_password: SecretStr = Field(
        default=SecretStr("Password123!"), description="Password for both test actors"
    )
    admin_email: str = Field(default="admin@titanic.com", description="Admin actor email")
    regular_email: str = Field(
        default="user@titanic.com", description="Regular actor email"
    )
    run_suffix: str | None = Field(
        default=None, description="Override for the per-run username suffix"
    )

    # Cleanup
    verify_cleanup: bool = Field(
        default=False, description="Read deleted passengers back and expect 404"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("run_suffix")
    @classmethod
    def validate_run_suffix(cls, v: str | None) -> str | None:
        """Usernames are built from the suffix, so it must be a plain token."""
        if v is None:
            return v
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError("Run suffix must be alphanumeric (with - or _)")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
