"""
Configuration management for CollabHub.
"""

from functools import lru_cache
from typing import FrozenSet

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_names(raw: str) -> FrozenSet[str]:
    """
    Parse a comma-separated list of names.

    Examples:
        "general,announcements" -> {"general", "announcements"}
        "  general , random  " -> {"general", "random"}
        "" -> set()
    """
    if not raw or not raw.strip():
        return frozenset()
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="COLLABHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="CollabHub")
    environment: str = Field(default="development")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="'json' or 'console'")

    # Policy Configuration
    reserved_channel_names: str = Field(
        default="general",
        description="Comma-separated channel names that nobody may rename or delete.",
    )

    @property
    def reserved_channels(self) -> FrozenSet[str]:
        return _parse_names(self.reserved_channel_names)


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
