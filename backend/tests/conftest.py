"""Root conftest — shared test configuration and async DB fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, sufficient for
      route and repository tests (no PostgreSQL-specific features in use)
    - StaticPool: every session shares the one connection holding the in-memory DB
"""

import os

# Keep tests away from any real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from devregistry.db.base import Base
from devregistry.infrastructure.database import get_db, DatabaseSessionManager
from devregistry.infrastructure.developer_repository import (
    SqlAlchemyDeveloperRepository,
)
from devregistry.models.developer import Developer
import devregistry.infrastructure.database as db_module
from devregistry.main import app


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
async def repository(test_db):
    return SqlAlchemyDeveloperRepository(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def fetch_developer(test_session_factory):
    """Read a developer through a fresh session (bypasses stale identity maps)."""
    async def _fetch(developer_id: int) -> Developer | None:
        async with test_session_factory() as session:
            return await session.get(Developer, developer_id)
    return _fetch

@pytest.fixture
async def seed_developers(test_db):
    """Insert developers directly into the test DB; returns them with ids."""
    async def _seed(*developers: Developer) -> list[Developer]:
        test_db.add_all(developers)
        await test_db.commit()
        for developer in developers:
            await test_db.refresh(developer)
        return list(developers)
    return _seed
