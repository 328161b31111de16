"""Display strings and navigation targets for the All Tasks list.

Turns view-model output into what a renderer shows: status names, row
labels, filter chips, the result count, and where clicking a row or a
project name leads.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.client.task_list import (
    UNASSIGNED_LABEL,
    Facets,
    FilterDimension,
    TaskFilters,
    is_overdue,
)
from app.domain.enums import TaskStatus
from app.schemas.dashboard import DashboardTaskResponse
from app.shared.utils.datetime import format_short_date

STATUS_NAMES: dict[str, str] = {
    TaskStatus.TO_DO.value: "To Do",
    TaskStatus.IN_PROGRESS.value: "In Progress",
    TaskStatus.IN_REVIEW.value: "In Review",
    TaskStatus.DONE.value: "Done",
}

# (id, display name) pairs offered in the status picker and the status filter.
STATUS_OPTIONS: list[tuple[str, str]] = [(s, STATUS_NAMES[s]) for s in TaskStatus.board_values()]

DEFAULT_PROJECT_ICON = "Layout"
NO_DUE_DATE_LABEL = "No due date"
PAGE_TITLE = "All Tasks"
EMPTY_TITLE = "No tasks yet"
EMPTY_MESSAGE = "Tasks from all your projects will appear here."
LOADING_PLACEHOLDER_ROWS = 5


def status_display_name(status: str) -> str:
    """Human name for a status; unknown values are shown as-is."""
    return STATUS_NAMES.get(status, status)


@dataclass(frozen=True)
class TaskRowView:
    """One rendered row of the task table."""

    task_id: str
    title: str
    number_label: str | None
    project_name: str
    project_icon: str
    status: str
    status_name: str
    assignee_label: str
    assignee_initial: str | None
    assignee_image: str | None
    due_date_label: str
    is_overdue: bool


def build_row(task: DashboardTaskResponse, now: datetime | None = None) -> TaskRowView:
    assigned = bool(task.assignee_id)
    name = task.assignee_name or ""
    initial = name[:1].upper() if assigned and name else None
    return TaskRowView(
        task_id=task.id,
        title=task.title,
        number_label=f"#{task.number}" if task.number is not None else None,
        project_name=task.project.name,
        project_icon=task.project.icon or DEFAULT_PROJECT_ICON,
        status=task.status,
        status_name=status_display_name(task.status),
        assignee_label=name if assigned else UNASSIGNED_LABEL,
        assignee_initial=initial,
        assignee_image=task.assignee_image if assigned else None,
        due_date_label=format_short_date(task.due_date) if task.due_date else NO_DUE_DATE_LABEL,
        is_overdue=is_overdue(task, now),
    )


@dataclass(frozen=True)
class FilterChip:
    """Removable chip describing one active filter."""

    dimension: FilterDimension
    value: str
    label: str


def filter_chips(filters: TaskFilters, facets: Facets) -> list[FilterChip]:
    """Chips for the active filters, in project, status, assignee order."""
    chips: list[FilterChip] = []
    if filters.project is not None:
        name = facets.project_name(filters.project) or ""
        chips.append(FilterChip(FilterDimension.PROJECT, filters.project, f"Project is {name}"))
    if filters.status is not None:
        chips.append(
            FilterChip(
                FilterDimension.STATUS,
                filters.status,
                f"Status is {status_display_name(filters.status)}",
            )
        )
    if filters.assignee is not None:
        name = facets.assignee_name(filters.assignee) or ""
        chips.append(FilterChip(FilterDimension.ASSIGNEE, filters.assignee, f"Assignee is {name}"))
    return chips


def count_label(count: int) -> str:
    return f"{count} task" if count == 1 else f"{count} tasks"


@dataclass(frozen=True)
class TaskSelection:
    """Query parameters that open the task details sheet."""

    task_id: str
    project_id: str
    workspace_id: str

    def as_query(self) -> dict[str, str]:
        return {
            "taskId": self.task_id,
            "projectId": self.project_id,
            "workspaceId": self.workspace_id,
        }


def task_selection(task: DashboardTaskResponse) -> TaskSelection:
    return TaskSelection(
        task_id=task.id,
        project_id=task.project_id,
        workspace_id=task.project.workspace_id,
    )


def parse_task_selection(params: dict[str, object]) -> TaskSelection | None:
    """Read a selection back from query params; None unless all three are strings."""
    values = [params.get(k) for k in ("taskId", "projectId", "workspaceId")]
    if not all(isinstance(v, str) and v for v in values):
        return None
    task_id, project_id, workspace_id = values
    return TaskSelection(task_id=task_id, project_id=project_id, workspace_id=workspace_id)


def project_board_path(task: DashboardTaskResponse) -> str:
    """Path of the board for the task's project."""
    project = task.project
    return f"/dashboard/workspace/{project.workspace_id}/project/{project.id}/board"
