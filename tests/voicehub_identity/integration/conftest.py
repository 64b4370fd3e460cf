"""
Database fixtures for voicehub_identity persistence tests.

Every test runs against in-memory SQLite. The PostgreSQL variant is marked
``integration`` and connects to TEST_DATABASE_URL, or to the database
described by the POSTGRES_* settings.
"""

import os

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Import models to register with Base.metadata
import voicehub_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from voicehub.infrastructure.persistence.sqlalchemy.models.base import Base
from voicehub_config import Settings

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


def _postgres_url() -> str:
    if url := os.environ.get("TEST_DATABASE_URL"):
        return url
    return Settings(database_backend="postgresql").database_url


@pytest.fixture(
    params=[
        "sqlite",
        pytest.param("postgresql", marks=pytest.mark.integration),
    ],
)
def database_url(request) -> str:
    if request.param == "sqlite":
        return SQLITE_URL
    return _postgres_url()


@pytest_asyncio.fixture
async def db_session(database_url):
    """Session on a freshly created schema, dropped afterwards."""
    if database_url == SQLITE_URL:
        engine = create_async_engine(database_url)
    else:
        engine = create_async_engine(database_url, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
