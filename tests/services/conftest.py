"""Service test fixtures - async DB, FastAPI test client and an in-memory fake repository.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - client sends the bearer token configured in tests/conftest.py
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import customer_api.infrastructure.database as db_module
from customer_api.db.base import Base
from customer_api.infrastructure.database import DatabaseSessionManager, get_db
from customer_api.main import app
from customer_api.services.customer_service import CustomerService
from tests.services.fake_repository import FakeCustomerRepository

import customer_api.models  # noqa: F401  (registers tables on Base.metadata)

AUTH_HEADERS = {"Authorization": "Bearer test-token"}
FIXED_TODAY = date(2026, 10, 16)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden and auth header set."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        headers=AUTH_HEADERS,
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def fake_repository():
    return FakeCustomerRepository()


@pytest.fixture
def make_service():
    """Build a CustomerService over a repository with a fixed clock."""
    def _make(repository, max_page_size: int = 50, default_page_size: int = 10):
        return CustomerService(
            repository,
            max_page_size=max_page_size,
            default_page_size=default_page_size,
            max_customer_age_years=150,
            clock=lambda: FIXED_TODAY,
        )
    return _make
