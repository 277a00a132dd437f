"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from stocklink.adapters.sqlalchemy.mappings import stock_source_link_table
from stocklink.domain.model import StockSourceLink
from stocklink.domain.ports import PersistenceError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


class SqlAlchemyStockSourceLinkRepository:
    """Stock to source links stored in ``inventory_source_stock_link``.

    Writes are flushed immediately so constraint violations surface as
    ``PersistenceError`` inside the calling unit of work; committing stays with
    the unit of work.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def fetch_by_stock(self, stock_id: int) -> Sequence[StockSourceLink]:
        stmt = (
            select(StockSourceLink)
            .where(stock_source_link_table.c.stock_id == stock_id)
            .order_by(stock_source_link_table.c.link_id)
        )
        try:
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not load links for stock {stock_id}") from exc

    def save(self, links: Sequence[StockSourceLink]) -> None:
        log.debug("Saving %s link(s)", len(links))
        try:
            self.session.add_all(links)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError("Could not save stock source links") from exc

    def delete(self, links: Sequence[StockSourceLink]) -> None:
        log.debug("Deleting %s link(s)", len(links))
        try:
            for link in links:
                self.session.delete(link)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError("Could not delete stock source links") from exc


if TYPE_CHECKING:
    from stocklink.domain.ports import StockSourceLinkRepository

    _session_stub = cast("Session", object())
    _repo_check: StockSourceLinkRepository = SqlAlchemyStockSourceLinkRepository(_session_stub)
