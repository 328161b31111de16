"""All Tasks list view model: facets, filtering, sorting and status-change intents.

Everything here is a pure function of (task list, filter state, sort state)
and is recomputed from scratch on every read, so replacing the task list
after a refresh can never leave stale derived state behind.
"""

from __future__ import annotations

import locale
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from app.domain.enums import SortDirection, SortField, TaskStatus, ViewState, status_rank
from app.domain.exceptions import ValidationException
from app.schemas.dashboard import DashboardTaskResponse
from app.shared.utils.datetime import ensure_utc, parse_iso_utc, utc_now

UNASSIGNED_LABEL = "Unassigned"

_HIDDEN_STATUSES = TaskStatus.dashboard_hidden()


class FilterDimension(str, Enum):
    """Filterable column of the dashboard list."""

    PROJECT = "project"
    STATUS = "status"
    ASSIGNEE = "assignee"


@dataclass(frozen=True)
class ProjectFacet:
    id: str
    name: str


@dataclass(frozen=True)
class AssigneeFacet:
    id: str
    name: str
    image: str | None


@dataclass(frozen=True)
class Facets:
    """Distinct projects and assignees present in the task list (first-seen order)."""

    projects: list[ProjectFacet] = field(default_factory=list)
    assignees: list[AssigneeFacet] = field(default_factory=list)

    def project_name(self, project_id: str) -> str | None:
        return next((p.name for p in self.projects if p.id == project_id), None)

    def assignee_name(self, assignee_id: str) -> str | None:
        return next((a.name for a in self.assignees if a.id == assignee_id), None)


@dataclass(frozen=True)
class TaskFilters:
    """User filter selection. None on a dimension means no constraint."""

    project: str | None = None
    status: str | None = None
    assignee: str | None = None

    @property
    def is_active(self) -> bool:
        return any(v is not None for v in (self.project, self.status, self.assignee))

    def toggle(self, dimension: FilterDimension | str, value: str | None) -> TaskFilters:
        """Set a dimension; selecting the value it already holds clears it."""
        key = FilterDimension(dimension).value
        current = getattr(self, key)
        return replace(self, **{key: None if current == value else value})

    def cleared(self) -> TaskFilters:
        return TaskFilters()


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction (default: due date, ascending)."""

    field: SortField = SortField.DUE_DATE
    direction: SortDirection = SortDirection.ASC

    def toggle(self, sort_field: SortField | str) -> SortState:
        """Flip direction on the active column; a new column starts ascending."""
        sort_field = SortField(sort_field)
        if sort_field == self.field:
            return SortState(self.field, self.direction.flipped())
        return SortState(sort_field, SortDirection.ASC)


@dataclass(frozen=True)
class TaskStatusChange:
    """Intent to change one task's status, handed to the mutation subsystem.

    task is the full row with the new status applied; due_date is the row's
    due date coerced to a datetime (None when absent).
    """

    task: DashboardTaskResponse
    status: str
    due_date: datetime | None

    @property
    def task_id(self) -> str:
        return self.task.id


def derive_facets(tasks: Iterable[DashboardTaskResponse]) -> Facets:
    """Collect distinct projects and assignees in one pass, keeping first-seen order."""
    projects: dict[str, ProjectFacet] = {}
    assignees: dict[str, AssigneeFacet] = {}
    for task in tasks:
        if task.project is not None and task.project.id not in projects:
            projects[task.project.id] = ProjectFacet(task.project.id, task.project.name)
        if task.assignee_id and task.assignee_name and task.assignee_id not in assignees:
            assignees[task.assignee_id] = AssigneeFacet(
                task.assignee_id, task.assignee_name, task.assignee_image
            )
    return Facets(projects=list(projects.values()), assignees=list(assignees.values()))


def is_dashboard_visible(task: DashboardTaskResponse) -> bool:
    """Archived and planned tasks never appear on the dashboard."""
    return task.status not in _HIDDEN_STATUSES


def matches_filters(task: DashboardTaskResponse, filters: TaskFilters) -> bool:
    if not is_dashboard_visible(task):
        return False
    if filters.project is not None and (task.project is None or task.project.id != filters.project):
        return False
    if filters.status is not None and task.status != filters.status:
        return False
    if filters.assignee is not None and task.assignee_id != filters.assignee:
        return False
    return True


def filter_tasks(
    tasks: Iterable[DashboardTaskResponse], filters: TaskFilters
) -> list[DashboardTaskResponse]:
    return [t for t in tasks if matches_filters(t, filters)]


def _collation_key(text: str) -> tuple[str, str]:
    # Accents and case are folded first so ordering holds under the C locale too;
    # strxfrm then applies LC_COLLATE and the raw text breaks remaining ties.
    cleaned = text.replace("\x00", "")
    decomposed = unicodedata.normalize("NFKD", cleaned)
    base = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return (locale.strxfrm(base), cleaned)


def _sort_key(task: DashboardTaskResponse, sort_field: SortField):
    if sort_field is SortField.TITLE:
        return _collation_key(task.title)
    if sort_field is SortField.PROJECT:
        return _collation_key(task.project.name if task.project else "")
    if sort_field is SortField.STATUS:
        return status_rank(task.status)
    if sort_field is SortField.ASSIGNEE:
        return _collation_key(task.assignee_name or UNASSIGNED_LABEL)
    return ensure_utc(task.due_date)


def sort_tasks(
    tasks: Sequence[DashboardTaskResponse], sort: SortState
) -> list[DashboardTaskResponse]:
    """Stable sort by the active column.

    For due date, tasks without one always come last, whichever the direction.
    """
    reverse = sort.direction is SortDirection.DESC
    if sort.field is SortField.DUE_DATE:
        dated = [t for t in tasks if t.due_date is not None]
        undated = [t for t in tasks if t.due_date is None]
        dated.sort(key=lambda t: _sort_key(t, SortField.DUE_DATE), reverse=reverse)
        return dated + undated
    return sorted(tasks, key=lambda t: _sort_key(t, sort.field), reverse=reverse)


def is_overdue(task: DashboardTaskResponse, now: datetime | None = None) -> bool:
    """Due strictly before now and not done. Display only; never filters or sorts."""
    if task.due_date is None or task.status == TaskStatus.DONE.value:
        return False
    return ensure_utc(task.due_date) < ensure_utc(now or utc_now())


def build_status_change(task: DashboardTaskResponse, new_status: str) -> TaskStatusChange:
    """Build the status-change intent for a row; the mutation itself happens elsewhere."""
    if new_status not in TaskStatus.values():
        raise ValidationException(f"Unknown task status: {new_status!r}", field="status")
    due_date = parse_iso_utc(task.due_date)
    updated = task.model_copy(update={"status": new_status, "due_date": due_date})
    return TaskStatusChange(task=updated, status=new_status, due_date=due_date)


def view_state(tasks: Sequence[DashboardTaskResponse] | None) -> ViewState:
    """loading before the first response, empty when the user has no tasks at all."""
    if tasks is None:
        return ViewState.LOADING
    if not tasks:
        return ViewState.EMPTY
    return ViewState.POPULATED


class TaskListViewModel:
    """Holds the fetched list plus filter/sort state and derives everything else.

    The task list is replaced wholesale by set_tasks; facets and the visible
    projection are recomputed on every access.
    """

    def __init__(
        self,
        tasks: Sequence[DashboardTaskResponse] | None = None,
        filters: TaskFilters | None = None,
        sort: SortState | None = None,
    ) -> None:
        self._tasks: tuple[DashboardTaskResponse, ...] | None = (
            tuple(tasks) if tasks is not None else None
        )
        self.filters = filters or TaskFilters()
        self.sort = sort or SortState()

    @property
    def tasks(self) -> tuple[DashboardTaskResponse, ...]:
        return self._tasks or ()

    def set_tasks(self, tasks: Sequence[DashboardTaskResponse]) -> None:
        self._tasks = tuple(tasks)

    @property
    def state(self) -> ViewState:
        return view_state(self._tasks)

    @property
    def facets(self) -> Facets:
        return derive_facets(self.tasks)

    @property
    def visible_tasks(self) -> list[DashboardTaskResponse]:
        return sort_tasks(filter_tasks(self.tasks, self.filters), self.sort)

    @property
    def has_active_filters(self) -> bool:
        return self.filters.is_active

    def toggle_filter(self, dimension: FilterDimension | str, value: str | None) -> None:
        self.filters = self.filters.toggle(dimension, value)

    def clear_filters(self) -> None:
        self.filters = self.filters.cleared()

    def toggle_sort(self, sort_field: SortField | str) -> None:
        self.sort = self.sort.toggle(sort_field)

    def status_change(self, task: DashboardTaskResponse, new_status: str) -> TaskStatusChange:
        return build_status_change(task, new_status)
