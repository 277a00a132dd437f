"""Index table name resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .state import IndexTableState

if TYPE_CHECKING:
    from .state import IndexTableSelector

TEMPORARY_TABLE_SUFFIX: Final[str] = "_tmp"


def resolve_index_table(base_name: str, selector: IndexTableSelector) -> str:
    """Return the table an indexer should target for ``base_name`` right now."""

    if selector.get_state() is IndexTableState.USE_TEMPORARY_TABLE:
        return f"{base_name}{TEMPORARY_TABLE_SUFFIX}"
    return base_name
