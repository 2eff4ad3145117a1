"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# must be set before the app reads its settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["NOTESNEST_SKIP_LIFESPAN_DB"] = "1"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notesnest.core.models.base import BaseModel
from notesnest.core.repositories.tenant_repository import TenantRepository
from notesnest.database import get_db_session
from notesnest.main import app
from notesnest.security import TokenService, get_token_service
from notesnest.seed import DEMO_PASSWORD, seed_demo_data

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_SECRET = "test-secret-key"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def token_service():
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def test_app(session_factory, token_service):
    """App wired to the test database; one session per request like production."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def demo_tenants(test_session):
    """Seeded acme/globex tenants keyed by slug."""
    await seed_demo_data(test_session)
    # start from a clean identity map, like a new request would
    test_session.expunge_all()
    repo = TenantRepository(test_session)
    return {slug: await repo.get_by_slug(slug) for slug in ("acme", "globex")}


async def login(client: AsyncClient, email: str, password: str = DEMO_PASSWORD) -> dict:
    """Log in through the API and return bearer headers."""
    resp = await client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def login_as(async_client, demo_tenants):
    async def _login(email: str, password: str = DEMO_PASSWORD) -> dict:
        return await login(async_client, email, password)

    return _login
