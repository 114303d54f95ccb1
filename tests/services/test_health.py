"""Health & Readiness — liveness always up, readiness follows the database."""

import catalog.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "paper-catalog-api", "version": "1.0.0",
    }


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}
