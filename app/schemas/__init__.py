"""Pydantic request/response schemas for the API."""

from app.schemas.dashboard import (
    DashboardLabelResponse,
    DashboardProjectResponse,
    DashboardTaskResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "DashboardLabelResponse",
    "DashboardProjectResponse",
    "DashboardTaskResponse",
    "HealthResponse",
]
