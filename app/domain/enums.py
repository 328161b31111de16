"""Domain enumerations for the Taskboard application.

Enums represent fixed sets of domain values (task status, sort keys).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task workflow status.

    ARCHIVED and PLANNED are valid stored states but are hidden from the
    All Tasks dashboard.
    """

    TO_DO = "to-do"
    IN_PROGRESS = "in-progress"
    IN_REVIEW = "in-review"
    DONE = "done"
    PLANNED = "planned"
    ARCHIVED = "archived"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]

    @classmethod
    def dashboard_hidden(cls) -> frozenset[str]:
        """Statuses never shown on the dashboard, regardless of filters."""
        return frozenset({cls.ARCHIVED.value, cls.PLANNED.value})

    @classmethod
    def board_values(cls) -> list[str]:
        """Statuses a user can pick from the dashboard, in workflow order."""
        return [cls.TO_DO.value, cls.IN_PROGRESS.value, cls.IN_REVIEW.value, cls.DONE.value]


# Total order over every stored status; unknown values rank -1.
STATUS_RANK: dict[str, int] = {
    TaskStatus.TO_DO.value: 0,
    TaskStatus.IN_PROGRESS.value: 1,
    TaskStatus.IN_REVIEW.value: 2,
    TaskStatus.DONE.value: 3,
    TaskStatus.PLANNED.value: 4,
    TaskStatus.ARCHIVED.value: 5,
}
UNKNOWN_STATUS_RANK = -1


def status_rank(status: str) -> int:
    """Return the sort rank for a status value (unknown statuses rank first)."""
    return STATUS_RANK.get(status, UNKNOWN_STATUS_RANK)


class SortField(str, Enum):
    """Column the dashboard list is sorted by."""

    TITLE = "title"
    PROJECT = "project"
    STATUS = "status"
    ASSIGNEE = "assignee"
    DUE_DATE = "due_date"


class SortDirection(str, Enum):
    """Sort direction for the dashboard list."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ViewState(str, Enum):
    """Externally observable state of the dashboard list."""

    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"
