"""Health & Readiness: liveness never touches the database, readiness does."""

from control_plane.main import app


async def test_healthz_returns_plain_ok(client):
    res = await client.get("/healthz")
    assert res.status_code == 200
    assert res.text == "ok"


async def test_healthz_ignores_database_state(client):
    app.state.db_manager = None
    res = await client.get("/healthz")
    assert res.status_code == 200


async def test_readyz_reports_healthy_database(client):
    res = await client.get("/readyz")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readyz_returns_503_without_database(client):
    app.state.db_manager = None
    res = await client.get("/readyz")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
