"""Which index table an indexation run should read and write.

``USE_MAIN_TABLE`` targets the regular index table. ``USE_TEMPORARY_TABLE``
leaves the regular table untouched and sends the run to a temporary table
that is swapped in once the rebuild completes.
"""

from __future__ import annotations

from enum import StrEnum


class IndexTableState(StrEnum):
    USE_TEMPORARY_TABLE = "use_temporary_table"
    USE_MAIN_TABLE = "use_main_table"


class IndexTableSelector:
    """Mutable table-selection flag owned by a single indexation run."""

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = IndexTableState.USE_MAIN_TABLE

    def use_temporary_index(self) -> None:
        self._state = IndexTableState.USE_TEMPORARY_TABLE

    def use_regular_index(self) -> None:
        self._state = IndexTableState.USE_MAIN_TABLE

    def get_state(self) -> IndexTableState:
        return self._state

    def __repr__(self) -> str:
        return f"IndexTableSelector(state={self._state.value!r})"
