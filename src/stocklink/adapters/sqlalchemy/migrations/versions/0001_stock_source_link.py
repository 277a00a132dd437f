"""create inventory_source_stock_link

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "inventory_source_stock_link",
        sa.Column("link_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("stock_id", sa.Integer(), nullable=False),
        sa.Column("source_code", sa.String(length=255), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("link_id", name=op.f("pk_inventory_source_stock_link")),
        sa.UniqueConstraint(
            "stock_id",
            "source_code",
            name=op.f("uq_inventory_source_stock_link_stock_id"),
        ),
    )


def downgrade() -> None:
    op.drop_table("inventory_source_stock_link")
