"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised here)
    - StaticPool: every session shares the one in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from newsdesk.db.base import Base
from newsdesk.infrastructure.database import get_db, DatabaseSessionManager
import newsdesk.infrastructure.database as db_module
from newsdesk.main import app
from newsdesk.services.entity_store import SqlAlchemyEntityStore


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
def store(test_db):
    return SqlAlchemyEntityStore(test_db)


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
async def auth_headers(client):
    """Register an author and return its bearer header."""
    res = await client.post("/api/v1/auth/register", json={
        "name": "Test Author",
        "email": "author@funews.edu.vn",
        "password": "secret123",
        "role": 2,
    })
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def create_category(client):
    """POST a category and return its JSON body."""
    async def _create(name, parent_id=None, is_active=True, description=None):
        res = await client.post("/api/v1/categories", json={
            "name": name,
            "parent_id": parent_id,
            "is_active": is_active,
            "description": description,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_tag(client):
    async def _create(name, note=None):
        res = await client.post("/api/v1/tags", json={"name": name, "note": note})
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_article(client, auth_headers):
    async def _create(category_id, title="Campus news", tag_ids=(), **fields):
        body = {
            "title": title,
            "content": f"Body of {title}",
            "category_id": category_id,
            "tag_ids": list(tag_ids),
            **fields,
        }
        res = await client.post("/api/v1/news-articles", json=body, headers=auth_headers)
        assert res.status_code == 201, res.text
        return res.json()
    return _create
