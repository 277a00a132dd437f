"""SQLAlchemy mapping metadata for the stocklink domain model."""

from __future__ import annotations

import logging
from sqlalchemy import (
    Column,
    Integer,
    String,
    Table,
    UniqueConstraint,
    inspect,
    orm,
)
from sqlalchemy.orm import configure_mappers

from stocklink.domain.model import StockSourceLink

log = logging.getLogger(__name__)

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

stock_source_link_table = Table(
    "inventory_source_stock_link",
    mapper_registry.metadata,
    Column("link_id", Integer, primary_key=True, autoincrement=True),
    Column("stock_id", Integer, nullable=False),
    Column("source_code", String(255), nullable=False),
    Column("priority", Integer, nullable=True),
    UniqueConstraint("stock_id", "source_code"),
)


def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model (safe to call repeatedly)."""

    if inspect(StockSourceLink, raiseerr=False) is not None:
        return mapper_registry

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        StockSourceLink,
        stock_source_link_table,
    )

    configure_mappers()
    return mapper_registry
