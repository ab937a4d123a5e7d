"""Shared test fixtures for pytest"""
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from main import app
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.persistence.database import Base, build_sessionmaker
from src.infrastructure.persistence.models import MessageModel  # noqa: F401
from src.infrastructure.persistence.repositories.in_memory_message_repo import (
    InMemoryMessageRepository,
)
from src.presentation.api import dependencies
from src.presentation.api.dependencies import get_date_provider, get_message_repo
from tests.doubles import FakeDateProvider

# In-memory SQLite shared by every connection of the engine
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

NOW = datetime(2020, 2, 14, 17, 46, 51)


@pytest.fixture
def date_provider() -> FakeDateProvider:
    """Clock frozen at 2020-02-14T17:46:51"""
    return FakeDateProvider(NOW)


@pytest.fixture
def message_repo() -> InMemoryMessageRepository:
    """Empty in-memory message repository"""
    return InMemoryMessageRepository()


@pytest.fixture
async def test_engine():
    """Create test database engine"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    """Create test database session"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
async def client(message_repo, date_provider):
    """HTTP client for API testing, backed by the in-memory repository and fixed clock"""

    async def override_get_message_repo():
        yield message_repo

    app.dependency_overrides[get_message_repo] = override_get_message_repo
    app.dependency_overrides[get_date_provider] = lambda: date_provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def database_client(test_engine, date_provider, monkeypatch):
    """HTTP client for API testing against the database store, one transaction per request"""
    settings = Settings(_env_file=None, message_store="database", database_url=TEST_DATABASE_URL)
    sessionmaker = build_sessionmaker(test_engine)
    monkeypatch.setattr(dependencies, "get_sessionmaker", lambda: sessionmaker)

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_date_provider] = lambda: date_provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
