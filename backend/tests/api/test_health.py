"""Health Probe — liveness endpoint responds while the process is up."""


async def test_health_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
