"""
api.deps
========

FastAPI dependency providers.

`get_clock` supplies the "now" every calculation is evaluated against;
tests swap it out through ``app.dependency_overrides`` to pin the date.
"""

from datetime import datetime
from functools import lru_cache
from typing import Callable

from patentterm.settings import Settings, settings


@lru_cache
def get_settings() -> Settings:
    """Return application settings."""
    return settings


def get_clock() -> Callable[[], datetime]:
    """Return the callable that yields the current moment."""
    return datetime.now
