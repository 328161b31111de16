"""All Tasks dashboard use case: every task the user can see, across workspaces.

Resolution is a four-stage fan-out (membership -> projects -> tasks ->
labels). Each stage short-circuits to an empty result when its input set is
empty, so users without workspaces or projects cost a single query.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from app.application.dtos.dashboard import (
    DashboardTask,
    LabelRow,
    ProjectSummary,
    TaskLabel,
    TaskRow,
)
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDashboardRepository

logger = logging.getLogger(__name__)


def group_labels_by_task(labels: Iterable[LabelRow]) -> dict[str, list[TaskLabel]]:
    """Index labels by task id, keeping retrieval order. Unattached labels are dropped."""
    index: dict[str, list[TaskLabel]] = {}
    for label in labels:
        if not label.task_id:
            continue
        index.setdefault(label.task_id, []).append(
            TaskLabel(id=label.id, name=label.name, color=label.color)
        )
    return index


def to_dashboard_task(row: TaskRow, labels: list[TaskLabel]) -> DashboardTask:
    """Attach labels and the nested project descriptor to a joined task row."""
    return DashboardTask(
        id=row.id,
        title=row.title,
        number=row.number,
        description=row.description,
        status=row.status,
        priority=row.priority,
        due_date=row.due_date,
        position=row.position,
        created_at=row.created_at,
        user_id=row.user_id,
        project_id=row.project_id,
        assignee_name=row.assignee_name,
        assignee_id=row.assignee_id,
        assignee_image=row.assignee_image,
        project=ProjectSummary(
            id=row.project_id,
            name=row.project_name,
            slug=row.project_slug,
            icon=row.project_icon,
            workspace_id=row.workspace_id,
        ),
        labels=labels,
    )


class GetAllTasksUseCase:
    """Aggregate tasks from every workspace the user belongs to.

    Read-only and stateless per call; repository errors propagate unchanged.
    Archived and planned tasks are returned too: hiding them is a view
    concern, not an access rule.
    """

    def __init__(self, dashboard_repo: "IDashboardRepository") -> None:
        self.dashboard_repo = dashboard_repo

    @traced("dashboard.get_all_tasks")
    async def get_all_tasks(self, user_id: str) -> list[DashboardTask]:
        """Return the user's visible tasks, oldest first, with labels and project."""
        workspace_ids = await self.dashboard_repo.list_workspace_ids_for_user(user_id)
        add_span_attributes(workspace_count=len(workspace_ids))
        if not workspace_ids:
            logger.debug("User %s has no workspace memberships", user_id)
            return []

        project_ids = await self.dashboard_repo.list_project_ids_for_workspaces(
            workspace_ids
        )
        add_span_attributes(project_count=len(project_ids))
        if not project_ids:
            return []

        rows = await self.dashboard_repo.list_tasks_for_projects(project_ids)
        add_span_attributes(task_count=len(rows))
        if not rows:
            return []

        label_rows = await self.dashboard_repo.list_labels_for_tasks(
            [row.id for row in rows]
        )
        labels_by_task = group_labels_by_task(label_rows)

        tasks = [to_dashboard_task(row, labels_by_task.get(row.id, [])) for row in rows]
        logger.debug(
            "Dashboard for user %s: %d workspaces, %d projects, %d tasks, %d labels",
            user_id,
            len(workspace_ids),
            len(project_ids),
            len(tasks),
            len(label_rows),
        )
        return tasks
