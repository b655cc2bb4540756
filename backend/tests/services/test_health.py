"""Health Probe — liveness endpoint returns 200 with service metadata."""

from continent_api import __version__


async def test_health_returns_200(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "continent-api",
        "version": __version__,
    }


async def test_unknown_route_is_framework_404(client):
    res = await client.get("/countries/asia")
    assert res.status_code == 404
