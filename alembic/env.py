"""Alembic environment configuration for async SQLAlchemy.

This env.py supports offline (SQL script generation) and online (direct
database connection) migration modes.  When the application's startup
sequence invokes Alembic it hands in an open connection through
``config.attributes["connection"]``; the command-line path builds its own
async engine from the configured URL.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from book_api.config import settings
from book_api.database import Base, Database

# Import all models so Alembic can detect them via Base.metadata.
import book_api.models  # noqa: F401

# ---------------------------------------------------------------------------
# Alembic Config object (gives access to values in alembic.ini)
# ---------------------------------------------------------------------------
config = context.config

if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# Fall back to Settings so credentials live in one place (.env / environment).
if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))

target_metadata = Base.metadata


# ---------------------------------------------------------------------------
# Offline migrations (generate SQL without a live DB connection)
# ---------------------------------------------------------------------------
def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Generates SQL scripts rather than executing against a live database.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


# ---------------------------------------------------------------------------
# Online migrations (run against a live DB connection)
# ---------------------------------------------------------------------------
def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Build a persistence handle and run migrations inside a sync wrapper.

    The handle applies the same TLS rule (DATABASE_SSL) as the application.
    """
    db = Database(config.get_main_option("sqlalchemy.url"), ssl=settings.DATABASE_SSL)

    async with db.engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await db.dispose()


def run_migrations_online() -> None:
    connection = config.attributes.get("connection")
    if connection is not None:
        do_run_migrations(connection)
    else:
        asyncio.run(run_async_migrations())


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
