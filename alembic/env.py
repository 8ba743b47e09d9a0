"""Alembic environment configuration."""

from __future__ import annotations

from alembic import context
from sqlalchemy import engine_from_config, pool

from userdesk_backend.database import BaseSchema
from userdesk_backend.logger import configure_logging
from userdesk_backend.settings import get_settings

config = context.config

settings = get_settings()
configure_logging(settings.log_level)
config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = BaseSchema.metadata


def run_migrations_offline() -> None:
    """Emit migration SQL without a database connection."""

    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations against the configured database."""

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
