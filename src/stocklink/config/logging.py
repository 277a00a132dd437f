"""Logging setup for the command line."""

from __future__ import annotations

import logging

# chatty at INFO; only surfaced when running with DEBUG
_QUIET_LOGGERS = ("alembic.runtime.migration", "sqlalchemy.engine")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger with a terse CLI format."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    quiet_level = level if level <= logging.DEBUG else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
