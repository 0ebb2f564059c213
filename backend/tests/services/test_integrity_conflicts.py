"""Integrity Conflicts — verifies that a write passing a stale uniqueness check is
rejected by the database as 409 INTEGRITY_CONFLICT.

Invariants:
    - The request path runs through the real DatabaseSessionManager (no get_db override)
    - Create (flush) and update (commit) surface the same conflict message
    - IntegrityError raised directly inside a managed session maps to IntegrityConflictError
"""

import pytest
from httpx import ASGITransport, AsyncClient

import newsdesk.infrastructure.database as db_module
import newsdesk.services.category_service as category_service
from newsdesk.core.errors import IntegrityConflictError
from newsdesk.db.base import Base
from newsdesk.infrastructure.database import DatabaseSessionManager
from newsdesk.main import app
from newsdesk.models.category import Category


@pytest.fixture
async def session_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'newsdesk.db'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def stale_client(session_manager, monkeypatch):
    """Client whose category uniqueness check always sees a stale, empty snapshot."""
    monkeypatch.setattr(db_module, "db_manager", session_manager)
    monkeypatch.setattr(category_service, "check_unique", lambda *args, **kwargs: None)
    app.dependency_overrides.clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


async def test_duplicate_create_is_integrity_conflict(stale_client):
    res = await stale_client.post("/api/v1/categories", json={"name": "Sports"})
    assert res.status_code == 201

    res = await stale_client.post("/api/v1/categories", json={"name": "Sports"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "INTEGRITY_CONFLICT"


async def test_duplicate_rename_is_integrity_conflict(stale_client):
    await stale_client.post("/api/v1/categories", json={"name": "A"})
    b = (await stale_client.post("/api/v1/categories", json={"name": "B"})).json()

    res = await stale_client.put(f"/api/v1/categories/{b['id']}", json={"name": "A"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "INTEGRITY_CONFLICT"

    res = await stale_client.get(f"/api/v1/categories/{b['id']}")
    assert res.json()["name"] == "B"


async def test_create_and_update_conflicts_share_one_message(stale_client):
    await stale_client.post("/api/v1/categories", json={"name": "A"})
    b = (await stale_client.post("/api/v1/categories", json={"name": "B"})).json()

    created = await stale_client.post("/api/v1/categories", json={"name": "A"})
    renamed = await stale_client.put(f"/api/v1/categories/{b['id']}", json={"name": "A"})
    assert created.json()["error"]["message"] == renamed.json()["error"]["message"]


async def test_session_manager_maps_integrity_error(session_manager):
    with pytest.raises(IntegrityConflictError):
        async with session_manager.session() as db:
            db.add_all([Category(name="Events"), Category(name="Events")])
            await db.flush()
