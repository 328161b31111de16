"""ORM models for the tables the dashboard reads."""

from app.infrastructure.persistence.models.label import Label
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.models.workspace import Workspace, WorkspaceUser

__all__ = [
    "Label",
    "Project",
    "Task",
    "User",
    "Workspace",
    "WorkspaceUser",
]
