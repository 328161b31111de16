"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """X-Request-ID sent by the caller comes back on the response."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})
    assert response.headers.get("X-Request-ID") == "req-123"


async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    """A request without X-Request-ID still gets one."""
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")


async def test_health_reports_service_and_version(client: AsyncClient) -> None:
    data = (await client.get("/api/v1/health")).json()
    assert data["service"] == "taskboard"
    assert data["version"]


async def test_unsafe_request_id_replaced(client: AsyncClient) -> None:
    """Ids with characters outside [A-Za-z0-9_-] are not echoed back."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id; drop"})
    echoed = response.headers.get("X-Request-ID")
    assert echoed
    assert echoed != "bad id; drop"
