"""
Configuration management for the café counter service.

Only the listening address and a handful of operational knobs come from
the environment. The menu and tax rate are fixed at startup and are not
configurable.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values are read from the process environment and an optional ``.env``
    file. ``PORT`` and ``HOST`` keep the names the counter displays already
    use when pointing at the server.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Environment Settings
    app_name: str = "CafeApp"
    environment: str = "development"
    log_level: str = "INFO"

    # Static display assets (kitchen screen, counter tablet)
    public_dir: str = "public"

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Ensure the log level is one the logging module understands."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()
