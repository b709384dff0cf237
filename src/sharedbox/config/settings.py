"""Configuration settings using Pydantic Settings.

Usage:
    from sharedbox.config import SharedBoxSettings, get_settings

    # Load from environment variables (SHAREDBOX_*)
    settings = get_settings()

    # Or override with explicit values
    settings = SharedBoxSettings(thread_safe=True)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SharedBoxSettings(BaseSettings):  # type: ignore[misc]
    """Process-wide configuration for shared boxes.

    Attributes:
        thread_safe: Allocate lock-guarded counters for new sharing groups.
        log_level: Level used by configure_logging when none is given.

    Environment Variables:
        SHAREDBOX_THREAD_SAFE
        SHAREDBOX_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="SHAREDBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    thread_safe: bool = False
    log_level: LogLevel = Field(default="WARNING")


@lru_cache(maxsize=1)
def get_settings() -> SharedBoxSettings:
    """Return the cached settings instance.

    Call ``get_settings.cache_clear()`` to pick up changed environment variables.
    """
    return SharedBoxSettings()
