"""Presentation-layer dependency injection (composition root).

Routes depend only on these dependencies, not on infrastructure directly.
"""

from app.api.v1.dependencies.auth import (
    get_current_user_id,
    get_current_user_id_optional,
)
from app.api.v1.dependencies.db import get_all_tasks_use_case, get_dashboard_repo

__all__ = [
    "get_all_tasks_use_case",
    "get_current_user_id",
    "get_current_user_id_optional",
    "get_dashboard_repo",
]
