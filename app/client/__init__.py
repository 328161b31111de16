"""Dashboard client: HTTP access, list view model, polling and status dispatch."""

from app.client.dispatch import StatusChangeDispatcher, TaskStatusUpdater
from app.client.http import DashboardClient, DashboardFetchError
from app.client.poller import DashboardPoller
from app.client.task_list import (
    AssigneeFacet,
    Facets,
    FilterDimension,
    ProjectFacet,
    SortState,
    TaskFilters,
    TaskListViewModel,
    TaskStatusChange,
    build_status_change,
    derive_facets,
    filter_tasks,
    is_overdue,
    sort_tasks,
    view_state,
)

__all__ = [
    "AssigneeFacet",
    "DashboardClient",
    "DashboardFetchError",
    "DashboardPoller",
    "Facets",
    "FilterDimension",
    "ProjectFacet",
    "SortState",
    "StatusChangeDispatcher",
    "TaskFilters",
    "TaskListViewModel",
    "TaskStatusChange",
    "TaskStatusUpdater",
    "build_status_change",
    "derive_facets",
    "filter_tasks",
    "is_overdue",
    "sort_tasks",
    "view_state",
]
