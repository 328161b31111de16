"""DTOs for the All Tasks dashboard (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TaskLabel:
    """Label as attached to a dashboard task."""

    id: str
    name: str
    color: str


@dataclass(frozen=True)
class LabelRow:
    """Label row as read from storage, still keyed by its task."""

    id: str
    name: str
    color: str
    task_id: str | None


@dataclass(frozen=True)
class ProjectSummary:
    """Project descriptor nested in each dashboard task."""

    id: str
    name: str
    slug: str
    icon: str | None
    workspace_id: str


@dataclass(frozen=True)
class TaskRow:
    """Task joined with its project (required) and assignee (optional).

    assignee_* are None when the task has no assignee or the assignee
    reference no longer resolves to a user; user_id keeps the stored value.
    """

    id: str
    title: str
    number: int | None
    description: str | None
    status: str
    priority: str | None
    due_date: datetime | None
    position: int | None
    created_at: datetime
    user_id: str | None
    project_id: str
    assignee_name: str | None
    assignee_id: str | None
    assignee_image: str | None
    project_name: str
    project_slug: str
    project_icon: str | None
    workspace_id: str


@dataclass(frozen=True)
class DashboardTask:
    """Denormalized, display-ready task: task + assignee + project + labels."""

    id: str
    title: str
    number: int | None
    description: str | None
    status: str
    priority: str | None
    due_date: datetime | None
    position: int | None
    created_at: datetime
    user_id: str | None
    project_id: str
    assignee_name: str | None
    assignee_id: str | None
    assignee_image: str | None
    project: ProjectSummary
    labels: list[TaskLabel] = field(default_factory=list)
