"""Dashboard read repository. Implements IDashboardRepository with SQLAlchemy."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.dashboard import LabelRow, TaskRow
from app.infrastructure.persistence.models import (
    Label,
    Project,
    Task,
    User,
    WorkspaceUser,
)
from app.shared.utils.datetime import ensure_utc


class DashboardRepository:
    """Reads membership, projects, tasks and labels for the All Tasks dashboard."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_workspace_ids_for_user(self, user_id: str) -> list[str]:
        """Return ids of workspaces the user is a member of."""
        result = await self.db.execute(
            select(WorkspaceUser.workspace_id).where(WorkspaceUser.user_id == user_id)
        )
        return list(dict.fromkeys(result.scalars().all()))

    async def list_project_ids_for_workspaces(
        self, workspace_ids: Sequence[str]
    ) -> list[str]:
        """Return ids of projects belonging to any of the workspaces."""
        if not workspace_ids:
            return []
        result = await self.db.execute(
            select(Project.id).where(Project.workspace_id.in_(list(workspace_ids)))
        )
        return list(result.scalars().all())

    async def list_tasks_for_projects(self, project_ids: Sequence[str]) -> list[TaskRow]:
        """Return tasks with project (inner join) and assignee (left join), oldest first.

        A task whose user_id no longer resolves keeps user_id but gets None
        for every assignee column.
        """
        if not project_ids:
            return []
        stmt = (
            select(
                Task.id,
                Task.title,
                Task.number,
                Task.description,
                Task.status,
                Task.priority,
                Task.due_date,
                Task.position,
                Task.created_at,
                Task.user_id,
                Task.project_id,
                User.name.label("assignee_name"),
                User.id.label("assignee_id"),
                User.image.label("assignee_image"),
                Project.name.label("project_name"),
                Project.slug.label("project_slug"),
                Project.icon.label("project_icon"),
                Project.workspace_id,
            )
            .select_from(Task)
            .outerjoin(User, Task.user_id == User.id)
            .join(Project, Task.project_id == Project.id)
            .where(Task.project_id.in_(list(project_ids)))
            .order_by(Task.created_at)
        )
        result = await self.db.execute(stmt)
        return [
            TaskRow(
                id=row["id"],
                title=row["title"],
                number=row["number"],
                description=row["description"],
                status=row["status"],
                priority=row["priority"],
                due_date=ensure_utc(row["due_date"]),
                position=row["position"],
                created_at=ensure_utc(row["created_at"]),
                user_id=row["user_id"],
                project_id=row["project_id"],
                assignee_name=row["assignee_name"],
                assignee_id=row["assignee_id"],
                assignee_image=row["assignee_image"],
                project_name=row["project_name"],
                project_slug=row["project_slug"],
                project_icon=row["project_icon"],
                workspace_id=row["workspace_id"],
            )
            for row in result.mappings().all()
        ]

    async def list_labels_for_tasks(self, task_ids: Sequence[str]) -> list[LabelRow]:
        """Return labels attached to any of the tasks, in retrieval order."""
        if not task_ids:
            return []
        result = await self.db.execute(
            select(Label.id, Label.name, Label.color, Label.task_id)
            .where(Label.task_id.in_(list(task_ids)))
            .order_by(Label.created_at, Label.id)
        )
        return [
            LabelRow(
                id=row["id"],
                name=row["name"],
                color=row["color"],
                task_id=row["task_id"],
            )
            for row in result.mappings().all()
        ]
