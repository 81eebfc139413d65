"""
Alembic environment.

The database URL is taken from the application settings, never from
alembic.ini.  SQLite databases are migrated in batch mode since SQLite
cannot ALTER most column properties in place.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel

from app.core.config import settings
# Registers every table on SQLModel.metadata
import app.db.base  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

target_metadata = SQLModel.metadata


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _configure_kwargs(url: str) -> dict:
    return { "target_metadata": target_metadata, "compare_type": True, "render_as_batch": _is_sqlite(url) }


def run_migrations_offline() -> None:
    """Emit migration SQL to the script output without a live connection."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, literal_binds=True, dialect_opts={ "paramstyle": "named" }, **_configure_kwargs(url))

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against the configured database."""
    connectable = engine_from_config(config.get_section(config.config_ini_section, { }), prefix="sqlalchemy.",
                                     poolclass=pool.NullPool, )

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs(str(connectable.url)))

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
