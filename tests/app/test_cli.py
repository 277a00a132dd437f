from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from stocklink.domain.ports import PersistenceError
from stocklink.domain.reconciliation import LinkReconciliationPlan, ValidationError
from stocklink.ui import cli as cli_module

if TYPE_CHECKING:
    from pathlib import Path


def _capture_assign(
    monkeypatch: pytest.MonkeyPatch,
) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_assign(
        stock_id: int, links_data: list[dict[str, object]], *, dry_run: bool = False
    ) -> LinkReconciliationPlan:
        captured.update(stock_id=stock_id, links_data=links_data, dry_run=dry_run)
        return LinkReconciliationPlan(stock_id=stock_id)

    monkeypatch.setattr(cli_module, "assign_stock_sources", fake_assign)
    return captured


def test_cli_assign_with_source_options(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_assign(monkeypatch)

    cli_module.main(["assign", "--stock-id", "5", "--source", "B:2", "--source", "D"])

    assert captured == {
        "stock_id": 5,
        "links_data": [{"source_code": "B", "priority": "2"}, {"source_code": "D"}],
        "dry_run": False,
    }


def test_cli_assign_without_sources_clears_stock(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_assign(monkeypatch)

    cli_module.main(["assign", "--stock-id", "5", "--clear", "--dry-run"])

    assert captured["links_data"] == []
    assert captured["dry_run"] is True


def test_cli_assign_with_links_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured = _capture_assign(monkeypatch)
    links_file = tmp_path / "links.json"
    links_file.write_text(
        json.dumps([{"source_code": "A", "priority": 1}, {"sourceCode": "B", "name": "x"}])
    )

    cli_module.main(["assign", "--stock-id", "2", "--links-file", str(links_file)])

    assert captured["links_data"] == [
        {"source_code": "A", "priority": 1},
        {"source_code": "B"},
    ]


def test_cli_links_file_null_priority_reaches_reconciler(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured = _capture_assign(monkeypatch)
    links_file = tmp_path / "links.json"
    links_file.write_text(json.dumps([{"source_code": "A", "priority": None}]))

    cli_module.main(["assign", "--stock-id", "2", "--links-file", str(links_file)])

    assert captured["links_data"] == [{"source_code": "A", "priority": None}]


def test_cli_assign_requires_an_input(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_assign(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["assign", "--stock-id", "5"])

    assert excinfo.value.code == 2
    assert captured == {}


def test_cli_clear_conflicts_with_sources(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture_assign(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["assign", "--stock-id", "5", "--clear", "--source", "A"])

    assert excinfo.value.code == 2


def test_cli_rejects_malformed_links_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _capture_assign(monkeypatch)
    links_file = tmp_path / "links.json"
    links_file.write_text(json.dumps([{"source_code": "A", "priority": "high"}]))

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["assign", "--stock-id", "2", "--links-file", str(links_file)])

    assert excinfo.value.code == 2


def test_cli_validation_error_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_assign(*_: object, **__: object) -> LinkReconciliationPlan:
        raise ValidationError("Link record #0 is missing 'source_code'", index=0)

    monkeypatch.setattr(cli_module, "assign_stock_sources", fake_assign)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["assign", "--stock-id", "1", "--source", ":3"])

    assert excinfo.value.code == 2


def test_cli_persistence_error_exits_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_assign(*_: object, **__: object) -> LinkReconciliationPlan:
        raise PersistenceError("database is locked")

    monkeypatch.setattr(cli_module, "assign_stock_sources", fake_assign)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["assign", "--stock-id", "1", "--source", "A"])

    assert excinfo.value.code == 1


def test_cli_list_reads_stock(monkeypatch: pytest.MonkeyPatch) -> None:
    requested: list[int] = []

    def fake_list(stock_id: int) -> list[object]:
        requested.append(stock_id)
        return []

    monkeypatch.setattr(cli_module, "list_stock_sources", fake_list)

    cli_module.main(["list", "--stock-id", "4"])

    assert requested == [4]


def test_cli_requires_stock_id() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["assign"])

    assert excinfo.value.code == 2
