"""GET /api/v1/dashboard/tasks: auth, wire format and error mapping."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.v1.dependencies import get_all_tasks_use_case
from app.application.dtos.dashboard import DashboardTask, ProjectSummary, TaskLabel
from app.core.config import get_settings
from app.infrastructure.persistence.database import dispose_engine
from app.infrastructure.security.jwt import create_access_token
from app.main import app

_URL = "/api/v1/dashboard/tasks"


def _dashboard_task() -> DashboardTask:
    return DashboardTask(
        id="t1",
        title="Ship it",
        number=7,
        description=None,
        status="in-review",
        priority="high",
        due_date=datetime(2025, 3, 1, tzinfo=UTC),
        position=0,
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
        user_id="u1",
        project_id="p1",
        assignee_name="Ann",
        assignee_id="u1",
        assignee_image=None,
        project=ProjectSummary(id="p1", name="Website", slug="WEB", icon=None, workspace_id="w1"),
        labels=[TaskLabel(id="l1", name="release", color="#0f0")],
    )


def _override(use_case: AsyncMock) -> None:
    app.dependency_overrides[get_all_tasks_use_case] = lambda: use_case


async def test_requires_bearer_token(client: AsyncClient) -> None:
    response = await client.get(_URL)
    assert response.status_code == 401
    assert response.headers.get("WWW-Authenticate") == "Bearer"
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_rejects_invalid_token(client: AsyncClient) -> None:
    response = await client.get(_URL, headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


async def test_rejects_token_without_subject(client: AsyncClient) -> None:
    token = create_access_token({"role": "member"})
    response = await client.get(_URL, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


async def test_returns_camel_case_tasks_for_token_subject(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    use_case = AsyncMock()
    use_case.get_all_tasks.return_value = [_dashboard_task()]
    _override(use_case)

    response = await client.get(_URL, headers=auth_headers)

    assert response.status_code == 200
    use_case.get_all_tasks.assert_awaited_once_with("u1")
    [task] = response.json()
    assert task["id"] == "t1"
    assert task["assigneeName"] == "Ann"
    assert task["projectId"] == "p1"
    assert task["project"] == {
        "id": "p1",
        "name": "Website",
        "slug": "WEB",
        "icon": None,
        "workspaceId": "w1",
    }
    assert task["labels"] == [{"id": "l1", "name": "release", "color": "#0f0"}]
    assert datetime.fromisoformat(task["dueDate"]) == datetime(2025, 3, 1, tzinfo=UTC)


async def test_empty_list_for_user_without_memberships(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    use_case = AsyncMock()
    use_case.get_all_tasks.return_value = []
    _override(use_case)

    response = await client.get(_URL, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


async def test_storage_failure_maps_to_500(auth_headers: dict[str, str]) -> None:
    """Unhandled errors become a generic 500; the server error middleware re-raises after responding."""
    use_case = AsyncMock()
    use_case.get_all_tasks.side_effect = RuntimeError("connection reset")
    _override(use_case)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(_URL, headers=auth_headers)
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"


async def test_unconfigured_database_maps_to_503(
    client: AsyncClient, auth_headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    get_settings.cache_clear()
    await dispose_engine()
    try:
        response = await client.get(_URL, headers=auth_headers)
    finally:
        get_settings.cache_clear()
        await dispose_engine()
    assert response.status_code == 503
    assert response.json()["error"] == "SQL_NOT_CONFIGURED"
