"""Database initialization utilities."""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import voicehub_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from voicehub.infrastructure.persistence.sqlalchemy.models.base import Base
from voicehub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create a standalone engine, e.g. for CLI commands."""
    settings = settings or get_settings()
    url = settings.database_url

    # Ensure data directory exists for SQLite
    database = make_url(url).database
    if url.startswith("sqlite") and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(settings: Settings | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = create_engine(settings)
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")
