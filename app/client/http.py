"""HTTP client for the dashboard read endpoint and the task status mutation."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from app.client.task_list import TaskStatusChange
from app.core.config import get_client_settings
from app.domain.exceptions import TaskboardException
from app.schemas.dashboard import DashboardTaskResponse

logger = logging.getLogger(__name__)

DASHBOARD_TASKS_PATH = "/api/v1/dashboard/tasks"
TASK_STATUS_PATH = "/api/v1/task/status/{task_id}"

_task_list_adapter = TypeAdapter(list[DashboardTaskResponse])


class DashboardFetchError(TaskboardException):
    """Raised for a non-success response; the message is the response body text."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(body, "DASHBOARD_FETCH_ERROR", {"status_code": status_code})


class DashboardClient:
    """Async client for GET /dashboard/tasks and PUT /task/status/{id}.

    Pass http_client to share a connection pool (or to inject a mock
    transport in tests); otherwise the client owns one and closes it in
    aclose().
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = get_client_settings()
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url or settings.dashboard_api_base_url,
            timeout=timeout or settings.dashboard_request_timeout_seconds,
        )
        self._headers = headers

    async def __aenter__(self) -> "DashboardClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        response = await self._http.request(method, url, headers=self._headers, **kwargs)
        if not response.is_success:
            logger.warning("%s %s failed with %d", method, url, response.status_code)
            raise DashboardFetchError(response.status_code, response.text)
        return response

    async def get_all_tasks(self) -> list[DashboardTaskResponse]:
        """Fetch every task visible to the caller.

        Raises:
            DashboardFetchError: on any non-2xx response.
        """
        response = await self._send("GET", DASHBOARD_TASKS_PATH)
        return _task_list_adapter.validate_python(response.json())

    async def update_task_status(self, change: TaskStatusChange) -> None:
        """Relay a status-change intent to the task mutation endpoint."""
        body: dict[str, Any] = {"status": change.status}
        if change.due_date is not None:
            body["dueDate"] = change.due_date.isoformat()
        await self._send(
            "PUT", TASK_STATUS_PATH.format(task_id=change.task_id), json=body
        )
