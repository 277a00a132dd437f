"""Replace strategy for the sources assigned to a stock.

The submitted records describe the complete desired set. Persisted links whose
source code is submitted again are updated in place, unknown codes become new
links and every persisted link left over is deleted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stocklink.domain.model import new_link

from .patch import apply_link_patch, parse_link_patches
from .plan import LinkReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from stocklink.domain.model import StockSourceLink
    from stocklink.domain.ports import LinkReader, LinkWriter

    from .patch import LinkPatch

log = logging.getLogger(__name__)


def plan_link_changes(
    stock_id: int,
    patches: Sequence[LinkPatch],
    existing: Sequence[StockSourceLink],
) -> LinkReconciliationPlan:
    """Diff validated ``patches`` against the links persisted for ``stock_id``.

    Persisted links are matched by source code and reused as the update target,
    so their identity survives. Whatever is not matched ends up in the delete batch.
    """

    existing_by_code = {link.source_code: link for link in existing}
    plan = LinkReconciliationPlan(stock_id=stock_id)
    for patch in patches:
        link = existing_by_code.pop(patch.source_code, None) or new_link()
        plan.to_save.append(apply_link_patch(link, patch, stock_id=stock_id))
    plan.to_delete.extend(existing_by_code.values())
    return plan


@dataclass(slots=True)
class LinkReconciler:
    """Rewrite the source links of one stock to match a desired set."""

    reader: LinkReader
    writer: LinkWriter

    def process(self, stock_id: int, links_data: Sequence[Mapping[str, object]]) -> None:
        """Validate ``links_data`` and persist the resulting batches."""

        self.execute(self.plan(stock_id, links_data))

    def plan(
        self, stock_id: int, links_data: Sequence[Mapping[str, object]]
    ) -> LinkReconciliationPlan:
        """Compute the batches for ``stock_id`` without writing anything."""

        patches = parse_link_patches(links_data)
        return plan_link_changes(stock_id, patches, self.reader.fetch_by_stock(stock_id))

    def execute(self, plan: LinkReconciliationPlan) -> None:
        if plan.is_empty:
            log.info("Links for stock %s need no changes", plan.stock_id)
            return
        log.info("Reconciling links for stock %s: %s", plan.stock_id, plan.summary())
        if plan.to_save:
            self.writer.save(plan.to_save)
        if plan.to_delete:
            self.writer.delete(plan.to_delete)
