"""Ports for persisting stock to source links."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stocklink.domain.model import StockSourceLink


class PersistenceError(RuntimeError):
    """Raised by link stores when reading or writing fails."""


@runtime_checkable
class LinkReader(Protocol):
    """Read access to the links currently persisted for a stock."""

    def fetch_by_stock(self, stock_id: int) -> Sequence[StockSourceLink]: ...


@runtime_checkable
class LinkWriter(Protocol):
    """Batch write access to persisted links.

    Both operations receive the whole batch at once and raise
    ``PersistenceError`` on storage failure.
    """

    def save(self, links: Sequence[StockSourceLink]) -> None: ...

    def delete(self, links: Sequence[StockSourceLink]) -> None: ...


@runtime_checkable
class StockSourceLinkRepository(LinkReader, LinkWriter, Protocol):
    """Persistence contract for stock to source links."""
