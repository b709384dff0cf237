"""Configuration module using Pydantic Settings.

Usage:
    from sharedbox.config import get_settings, configure_logging

    settings = get_settings()
    configure_logging("DEBUG")
"""

from sharedbox.config.log import configure_logging
from sharedbox.config.settings import SharedBoxSettings, get_settings

__all__ = [
    "SharedBoxSettings",
    "get_settings",
    "configure_logging",
]
