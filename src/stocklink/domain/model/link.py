"""Stock to source association."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, kw_only=True)
class StockSourceLink:
    """Assignment of one source to one stock.

    ``link_id`` stays ``None`` until the link has been persisted. Within a stock
    the ``source_code`` is the natural key.
    """

    link_id: int | None = None
    stock_id: int | None = None
    source_code: str = ""
    priority: int | None = None

    @property
    def is_persisted(self) -> bool:
        return self.link_id is not None


def new_link() -> StockSourceLink:
    return StockSourceLink()
