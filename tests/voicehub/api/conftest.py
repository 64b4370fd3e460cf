"""Pytest fixtures for API tests."""

import asyncio
from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Import models to register with Base.metadata
import voicehub_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from voicehub.infrastructure.persistence.sqlalchemy.models.base import Base
from voicehub.presentation.api.app import API_V1_PREFIX, create_app
from voicehub.presentation.api.config import get_api_settings
from voicehub.presentation.api.dependencies import get_db_session, get_oauth_providers
from voicehub_config.settings import Settings
from voicehub_identity.application.dtos import (
    OAuthProviderName,
    ProviderEmail,
    ProviderProfile,
    ProviderTokens,
)
from voicehub_identity.application.ports import OAuthProviderAdapter
from voicehub_identity.domain.account import Account, AccountRole
from voicehub_identity.exceptions import ProviderExchangeFailedError
from voicehub_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

FRONTEND_URL = "https://voice.example.com"


@dataclass
class FakeProvider(OAuthProviderAdapter):
    """In-process provider returning canned answers."""

    name: OAuthProviderName
    profile: ProviderProfile = field(
        default_factory=lambda: ProviderProfile(
            provider_user_id="1",
            email="x@y.com",
            display_name="X Y",
        )
    )
    emails: list[ProviderEmail] = field(default_factory=list)
    exchange_error: ProviderExchangeFailedError | None = None
    exchanged: list[tuple[str, str]] = field(default_factory=list)

    def authorization_url(self, redirect_uri: str, state: str) -> str:
        return f"https://{self.name.value}.test/authorize?redirect_uri={redirect_uri}"

    async def exchange_code(self, code: str, redirect_uri: str) -> ProviderTokens:
        self.exchanged.append((code, redirect_uri))
        if self.exchange_error is not None:
            raise self.exchange_error
        return ProviderTokens(access_token=f"token-{code}")

    async def fetch_profile(self, tokens: ProviderTokens) -> ProviderProfile:
        return self.profile

    async def fetch_emails(self, tokens: ProviderTokens) -> list[ProviderEmail]:
        return self.emails


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        database_backend="sqlite",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        frontend_base_url=FRONTEND_URL,
    )


@pytest.fixture
def github() -> FakeProvider:
    return FakeProvider(name=OAuthProviderName.GITHUB)


@pytest.fixture
def google() -> FakeProvider:
    return FakeProvider(name=OAuthProviderName.GOOGLE)


@pytest.fixture
def test_db_engine(tmp_path):
    """File-backed SQLite database shared by the app and the test."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'voicehub.db'}",
        echo=False,
        poolclass=NullPool,
    )

    async def _create_schema():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create_schema())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def test_client(api_settings, test_db_engine, github, google) -> TestClient:
    """Create a test client with fake providers and a temporary database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_oauth_providers] = lambda: {
        OAuthProviderName.GITHUB: github,
        OAuthProviderName.GOOGLE: google,
    }

    return TestClient(app)


@pytest.fixture
def seed_account(test_db_engine):
    """Store an account directly, bypassing the API."""

    def _seed(account: Account) -> Account:
        async def _save():
            session_maker = async_sessionmaker(test_db_engine, expire_on_commit=False)
            async with session_maker() as session:
                await AccountRepositorySQLAlchemy(session).save(account)
                await session.commit()

        asyncio.run(_save())
        return account

    return _seed


@pytest.fixture
def load_account(test_db_engine):
    """Read an account back from the database."""

    def _load(email: str, role: AccountRole = AccountRole.REVIEWER) -> Account | None:
        async def _find():
            session_maker = async_sessionmaker(test_db_engine, expire_on_commit=False)
            async with session_maker() as session:
                return await AccountRepositorySQLAlchemy(session).find_by_email_and_role(
                    email,
                    role,
                )

        return asyncio.run(_find())

    return _load
