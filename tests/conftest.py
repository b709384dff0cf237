"""Shared test fixtures."""

import logging
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from sharedbox.config import get_settings
from sharedbox.demo import Point


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Reload settings per test so SHAREDBOX_* overrides never leak."""
    monkeypatch.delenv("SHAREDBOX_THREAD_SAFE", raising=False)
    monkeypatch.delenv("SHAREDBOX_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def detach_log_handlers():
    """Drop handlers configure_logging() attached; they bind the captured stderr."""
    yield
    logger = logging.getLogger("sharedbox")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@dataclass
class Released:
    """Deleter that records every value it is handed."""

    values: list = field(default_factory=list)

    def __call__(self, value) -> None:
        self.values.append(value)


@pytest.fixture
def released():
    """Recording deleter."""
    return Released()


@pytest.fixture
def point_cls():
    return Point
