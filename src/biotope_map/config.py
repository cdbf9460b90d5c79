"""
Application settings.

Values come from environment variables prefixed with ``BIOTOPE_MAP_``
(or a local ``.env`` file), e.g. ``BIOTOPE_MAP_PORT=9000``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the server, CLI and HTTP clients."""

    model_config = SettingsConfigDict(
        env_prefix="BIOTOPE_MAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "biotope-map"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    # Observation search radius around the resolved city centre
    radius_km: float = Field(default=20, gt=0)

    # 0 disables the timeout
    http_timeout: float = Field(default=30, ge=0)
    http_retries: int = Field(default=0, ge=0)

    site_dir: str = "site"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
