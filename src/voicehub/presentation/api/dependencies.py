"""FastAPI dependency injection for the VoiceHub API.

Provides dependencies for:
- Database sessions
- OAuth provider adapters
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from voicehub.presentation.api.config import get_api_settings
from voicehub_config.settings import Settings, get_settings
from voicehub_identity.application.dtos import OAuthProviderName
from voicehub_identity.application.ports import OAuthProviderAdapter
from voicehub_identity.application.services import OAuthIdentityResolver
from voicehub_identity.infrastructure.oauth import build_oauth_providers
from voicehub_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# OAuth
# -----------------------------------------------------------------------------


def get_oauth_providers(
    settings: SettingsDep,
) -> dict[OAuthProviderName, OAuthProviderAdapter]:
    """Adapters for every provider with credentials configured."""
    return build_oauth_providers(settings)


OAuthProviders = Annotated[
    dict[OAuthProviderName, OAuthProviderAdapter],
    Depends(get_oauth_providers),
]


def get_identity_resolver(
    session: DBSession,
    providers: OAuthProviders,
    settings: SettingsDep,
) -> OAuthIdentityResolver:
    """Get the OAuth identity resolver bound to the request session."""
    return OAuthIdentityResolver(
        account_repository=AccountRepositorySQLAlchemy(session),
        providers=providers,
        frontend_base_url=settings.frontend_base_url,
    )


IdentityResolver = Annotated[OAuthIdentityResolver, Depends(get_identity_resolver)]
