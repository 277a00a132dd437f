"""Transaction boundary around the link repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from stocklink.domain.ports.persistence import StockSourceLinkRepository


@runtime_checkable
class LinkUnitOfWork(Protocol):
    """One transaction covering the reads and writes of a single reconciliation.

    Leaving the context without ``commit()`` discards every write; leaving it
    through an exception rolls back.
    """

    @property
    def links(self) -> StockSourceLinkRepository: ...

    def __enter__(self) -> LinkUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
