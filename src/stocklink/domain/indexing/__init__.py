"""Index table selection for rebuild-and-swap indexation."""

from __future__ import annotations

from .state import IndexTableSelector, IndexTableState
from .tables import TEMPORARY_TABLE_SUFFIX, resolve_index_table

__all__ = [
    "TEMPORARY_TABLE_SUFFIX",
    "IndexTableSelector",
    "IndexTableState",
    "resolve_index_table",
]
