"""SQLAlchemy session handling for link reconciliation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from stocklink.adapters.sqlalchemy.mappings import start_mappers
from stocklink.adapters.sqlalchemy.migrations import upgrade_head
from stocklink.adapters.sqlalchemy.repositories import SqlAlchemyStockSourceLinkRepository
from stocklink.config import get_database_uri

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when a unit of work is requested before ``startup()``."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Map the model, migrate the schema and bind the session factory."""

    global _engine, _session_factory  # noqa: PLW0603
    if _session_factory is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    resolved_engine = engine or create_engine(database_uri or get_database_uri(), future=True)
    log.debug("Binding link store to %s", resolved_engine.url)
    start_mappers()
    upgrade_head(resolved_engine)
    _engine = resolved_engine
    _session_factory = sessionmaker(bind=resolved_engine, expire_on_commit=False)


def is_started() -> bool:
    return _session_factory is not None


def shutdown() -> None:
    """Dispose the bound engine and forget it (primarily for tests)."""

    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


class SqlAlchemyLinkUnitOfWork:
    """Session-per-reconciliation unit of work.

    Objects stay readable after the context closes: the session does not expire
    them on commit and closing only detaches them.
    """

    def __init__(self) -> None:
        if _session_factory is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call stocklink.adapters.sqlalchemy."
                "startup() before requesting a unit of work."
            )
        self._session_factory = _session_factory
        self._session: Session | None = None
        self._links: SqlAlchemyStockSourceLinkRepository | None = None

    def __enter__(self) -> SqlAlchemyLinkUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work session already open")
        self._session = self._session_factory()
        self._links = SqlAlchemyStockSourceLinkRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self._session = None
        self._links = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not open")
        return self._session

    @property
    def links(self) -> SqlAlchemyStockSourceLinkRepository:
        if self._links is None:
            raise StartupError("Unit of work session not open")
        return self._links

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from stocklink.domain.ports import LinkUnitOfWork

    _uow_check: LinkUnitOfWork = SqlAlchemyLinkUnitOfWork()
