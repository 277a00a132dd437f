"""Alembic migrations for the link table, run programmatically at startup."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent


def upgrade_head(engine: Engine) -> None:
    """Bring the schema behind ``engine`` to the latest revision.

    The migration runs on a connection borrowed from ``engine`` (see ``env.py``),
    so in-memory SQLite databases are migrated in place.
    """

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
