"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so readiness checks hit the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so data written
      through one session is visible to the next
    - Service-level tests use test_db; route tests go through client only
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import catalog.models  # noqa: F401
from catalog.db.base import Base
from catalog.infrastructure.database import get_db, DatabaseSessionManager
import catalog.infrastructure.database as db_module
from catalog.main import app


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


SAMPLE_PAPER = {
    "title": "Sample Paper Title",
    "publishedIn": "ICSE 2024",
    "year": 2024,
    "authors": [
        {
            "name": "John Doe",
            "email": "john@mail.utoronto.ca",
            "affiliation": "University of Toronto",
        },
        {
            "name": "Jane Smith",
            "email": None,
            "affiliation": "University A",
        },
    ],
}


@pytest.fixture
def sample_paper():
    """Fresh copy of the sample paper body."""
    return {
        **SAMPLE_PAPER,
        "authors": [dict(a) for a in SAMPLE_PAPER["authors"]],
    }


@pytest.fixture
def create_paper(client):
    """Factory: POST a paper and return the response JSON."""
    async def _create(body: dict) -> dict:
        res = await client.post("/api/papers", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_author(client):
    """Factory: POST an author and return the response JSON."""
    async def _create(body: dict) -> dict:
        res = await client.post("/api/authors", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _create
