"""Runtime settings read from the environment (``.env`` is loaded by the CLI)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

DATABASE_URI_ENV_VAR: Final[str] = "DATABASE_URI"
DATA_DIR_ENV_VAR: Final[str] = "STOCKLINK_DATA_DIR"
LOG_LEVEL_ENV_VAR: Final[str] = "STOCKLINK_LOG_LEVEL"
DEFAULT_DB_FILENAME: Final[str] = "stocklink.db"


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


def get_data_dir() -> Path:
    """Directory holding the default SQLite database, created on demand."""

    env_dir = os.getenv(DATA_DIR_ENV_VAR)
    if env_dir:
        data_dir = Path(env_dir)
    else:
        base = os.getenv("XDG_DATA_HOME")
        data_dir = (Path(base) if base else Path.home() / ".local" / "share") / "stocklink"
    data_dir = data_dir.expanduser().resolve()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_database_uri() -> str:
    env_uri = os.getenv(DATABASE_URI_ENV_VAR)
    if env_uri:
        return env_uri
    return f"sqlite+pysqlite:///{get_data_dir() / DEFAULT_DB_FILENAME}"


def get_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``STOCKLINK_LOG_LEVEL`` (or ``default``)."""

    raw = os.getenv(LOG_LEVEL_ENV_VAR)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {raw}")
    return level
