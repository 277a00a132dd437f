"""Alembic environment for stocklink.

Migrations only run through ``upgrade_head``, which hands over an open
connection in ``config.attributes``.
"""

from __future__ import annotations

from alembic import context

from stocklink.adapters.sqlalchemy.mappings import mapper_registry

connection = context.config.attributes.get("connection")
if connection is None:
    raise RuntimeError("stocklink migrations run through upgrade_head(engine)")

context.configure(
    connection=connection,
    target_metadata=mapper_registry.metadata,
    render_as_batch=True,
    compare_type=True,
)

with context.begin_transaction():
    context.run_migrations()
