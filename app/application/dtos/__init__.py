"""Application DTOs: plain dataclasses passed between layers (no ORM types)."""

from app.application.dtos.dashboard import (
    DashboardTask,
    LabelRow,
    ProjectSummary,
    TaskLabel,
    TaskRow,
)

__all__ = [
    "DashboardTask",
    "LabelRow",
    "ProjectSummary",
    "TaskLabel",
    "TaskRow",
]
