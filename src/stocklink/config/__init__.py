"""Application configuration helpers."""

from __future__ import annotations

from .logging import configure_logging
from .settings import ConfigurationError, get_database_uri, get_log_level

__all__ = [
    "ConfigurationError",
    "configure_logging",
    "get_database_uri",
    "get_log_level",
]
