"""Health probes — liveness always up, readiness follows the store."""


async def test_liveness_returns_healthy(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_ready_store(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"storage": "healthy"}}


async def test_readiness_returns_503_when_store_down(client, store, monkeypatch):
    async def _down():
        return False
    monkeypatch.setattr(store, "health_check", _down)

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "storage_unavailable"
