"""Domain model for stock to source links."""

from __future__ import annotations

from .link import StockSourceLink, new_link

__all__ = [
    "StockSourceLink",
    "new_link",
]
