"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from stocklink.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLinkUnitOfWork,
    is_started,
    startup,
)
from stocklink.domain.ports.unit_of_work import LinkUnitOfWork
from stocklink.domain.reconciliation import LinkReconciler, LinkReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from stocklink.domain.model import StockSourceLink

UnitOfWorkFactory = Callable[[], LinkUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work_factory(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyLinkUnitOfWork


def assign_stock_sources(
    stock_id: int,
    links_data: Sequence[Mapping[str, object]],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    dry_run: bool = False,
) -> LinkReconciliationPlan:
    """Replace the sources assigned to ``stock_id`` inside one transaction.

    With ``dry_run`` the batches are computed and returned but nothing is written.
    """

    effective_uow = _resolve_unit_of_work_factory(unit_of_work_factory)
    with effective_uow() as uow:
        links = uow.links
        reconciler = LinkReconciler(reader=links, writer=links)
        plan = reconciler.plan(stock_id, links_data)
        if dry_run:
            log.info("Dry run for stock %s: %s", stock_id, plan.summary())
            return plan
        reconciler.execute(plan)
        uow.commit()

    log.info(
        "Finished assigning sources to stock %s: saved=%s, deleted=%s",
        stock_id,
        plan.saved_codes(),
        plan.deleted_codes(),
    )
    return plan


def list_stock_sources(
    stock_id: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[StockSourceLink]:
    """Return the links currently persisted for ``stock_id``."""

    effective_uow = _resolve_unit_of_work_factory(unit_of_work_factory)
    with effective_uow() as uow:
        return list(uow.links.fetch_by_stock(stock_id))
