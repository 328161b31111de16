"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.dashboard import LabelRow, TaskRow


class IDashboardRepository(Protocol):
    """Protocol for the dashboard read repository (DIP).

    One method per aggregation stage so callers can short-circuit between
    stages without issuing further queries.
    """

    async def list_workspace_ids_for_user(self, user_id: str) -> list[str]:
        """Return ids of workspaces the user is a member of."""

    async def list_project_ids_for_workspaces(
        self, workspace_ids: Sequence[str]
    ) -> list[str]:
        """Return ids of projects belonging to any of the workspaces."""

    async def list_tasks_for_projects(self, project_ids: Sequence[str]) -> list[TaskRow]:
        """Return tasks in the projects joined with project (inner) and assignee (outer), oldest first."""

    async def list_labels_for_tasks(self, task_ids: Sequence[str]) -> list[LabelRow]:
        """Return labels attached to any of the tasks, in retrieval order."""
