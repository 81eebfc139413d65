"""
Database initialization.

Creates all tables.  Production deployments use Alembic migrations
instead; this is for local SQLite runs and fresh databases.
"""

from sqlmodel import SQLModel

from app.core.logging import get_logger
from app.db.session import engine

logger = get_logger(__name__)


def init_db() -> None:
    """Create all SQLModel tables that do not exist yet."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("creating_tables", url=engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("tables_created", tables=sorted(SQLModel.metadata.tables))


if __name__ == "__main__":
    init_db()
