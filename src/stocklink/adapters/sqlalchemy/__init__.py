"""SQLAlchemy adapter package for stocklink."""

from __future__ import annotations

from .mappings import mapper_registry, start_mappers, stock_source_link_table
from .repositories import SqlAlchemyStockSourceLinkRepository
from .unit_of_work import (
    SqlAlchemyLinkUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyLinkUnitOfWork",
    "SqlAlchemyStockSourceLinkRepository",
    "StartupError",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "stock_source_link_table",
]
