# Settings — connection details for the Reminders API server.
# Created: 2026-03-02
#
# Values come from REMINDERS_* environment variables or a local .env file.

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Runtime settings for the Reminders nodes."""

    model_config = SettingsConfigDict(
        env_prefix="REMINDERS_",
        env_file=".env",
        extra="ignore",
    )

    # Reminders API server
    base_url: str = "http://127.0.0.1:8080"
    api_token: str = ""
    allow_unauthorized_certs: bool = False
    request_timeout: float = 15.0

    # Node execution
    continue_on_fail: bool = False

    # Local REST surface
    api_host: str = "127.0.0.1"
    api_port: int = 8890

    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def verify_tls(self) -> bool:
        return not self.allow_unauthorized_certs


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    settings = Settings()
    logger.debug("Loaded settings for %s", settings.base_url)
    return settings
