"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    LinkReader,
    LinkWriter,
    PersistenceError,
    StockSourceLinkRepository,
)
from .unit_of_work import LinkUnitOfWork

__all__ = [
    "LinkReader",
    "LinkUnitOfWork",
    "LinkWriter",
    "PersistenceError",
    "StockSourceLinkRepository",
]
