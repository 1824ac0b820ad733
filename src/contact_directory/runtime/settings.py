"""Environment-based settings configuration.

Only simple primitive values (strings, booleans) are read here, from
environment variables prefixed with ``CONTACTS_`` and from a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContactDirectorySettings(BaseSettings):
    """Settings that come from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONTACTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["plain", "json"] = Field(default="plain")
    log_file: str | None = Field(default=None)

    # Wrap every directory operation in a single lock
    thread_safe: bool = Field(default=False)


@lru_cache
def get_settings() -> ContactDirectorySettings:
    """Return the process-wide settings, loaded once."""
    return ContactDirectorySettings()
