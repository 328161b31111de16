"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application,
infrastructure and client layers.
"""

from app.domain.enums import (
    SortDirection,
    SortField,
    TaskStatus,
    ViewState,
    status_rank,
)
from app.domain.exceptions import (
    AuthenticationException,
    SqlNotConfiguredException,
    TaskboardException,
    ValidationException,
)

__all__ = [
    # Enums
    "SortDirection",
    "SortField",
    "TaskStatus",
    "ViewState",
    "status_rank",
    # Exceptions
    "AuthenticationException",
    "SqlNotConfiguredException",
    "TaskboardException",
    "ValidationException",
]
