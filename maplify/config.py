"""
Configuration management for Maplify.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MaplifySettings(BaseSettings):
    """Runtime settings for fetching, extraction and matching."""

    model_config = SettingsConfigDict(
        env_prefix="MAPLIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # HTTP settings
    http_timeout: float = 30.0  # seconds
    user_agent: str = "Maplify/1.0 (+https://github.com/maplify)"
    accept: str = "application/json, text/html;q=0.9, */*;q=0.8"

    # Extraction settings
    max_search_depth: int = Field(default=64, ge=1)

    # Matching settings
    min_score: float = Field(default=0.0, ge=0.0, le=1.0)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        """Loguru level names are upper case."""
        return str(v).upper()

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent with every source request."""
        return {"User-Agent": self.user_agent, "Accept": self.accept}


@lru_cache()
def get_settings() -> MaplifySettings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return MaplifySettings()
