"""Save/delete batches computed for one stock."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stocklink.domain.model import StockSourceLink


@dataclass(slots=True)
class LinkReconciliationPlan:
    """Disjoint batches that bring a stock's links in line with the desired set."""

    stock_id: int
    to_save: list[StockSourceLink] = field(default_factory=list["StockSourceLink"])
    to_delete: list[StockSourceLink] = field(default_factory=list["StockSourceLink"])

    @property
    def is_empty(self) -> bool:
        return not self.to_save and not self.to_delete

    def saved_codes(self) -> list[str]:
        return [link.source_code for link in self.to_save]

    def deleted_codes(self) -> list[str]:
        return [link.source_code for link in self.to_delete]

    def summary(self) -> dict[str, int]:
        return {"saved": len(self.to_save), "deleted": len(self.to_delete)}
