from __future__ import annotations

from stocklink.domain.indexing import IndexTableSelector, IndexTableState


def test_selector_defaults_to_main_table() -> None:
    assert IndexTableSelector().get_state() is IndexTableState.USE_MAIN_TABLE


def test_selector_switches_between_tables() -> None:
    selector = IndexTableSelector()

    selector.use_temporary_index()
    assert selector.get_state() is IndexTableState.USE_TEMPORARY_TABLE

    selector.use_regular_index()
    assert selector.get_state() is IndexTableState.USE_MAIN_TABLE


def test_selector_calls_are_idempotent() -> None:
    selector = IndexTableSelector()

    selector.use_temporary_index()
    selector.use_temporary_index()
    assert selector.get_state() is IndexTableState.USE_TEMPORARY_TABLE

    selector.use_regular_index()
    selector.use_regular_index()
    assert selector.get_state() is IndexTableState.USE_MAIN_TABLE


def test_selectors_do_not_share_state() -> None:
    rebuilding = IndexTableSelector()
    serving = IndexTableSelector()

    rebuilding.use_temporary_index()

    assert serving.get_state() is IndexTableState.USE_MAIN_TABLE


def test_state_values_are_stable() -> None:
    assert {state.value for state in IndexTableState} == {"use_temporary_table", "use_main_table"}
    assert repr(IndexTableSelector()) == "IndexTableSelector(state='use_main_table')"
