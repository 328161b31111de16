"""Dashboard API schemas.

The wire format uses camelCase field names (dueDate, assigneeName, ...);
Python code uses snake_case attributes. The same models are used by the
dashboard client to parse responses.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(
    from_attributes=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class DashboardLabelResponse(BaseModel):
    """Label attached to a dashboard task."""

    model_config = _WIRE_CONFIG

    id: str
    name: str
    color: str


class DashboardProjectResponse(BaseModel):
    """Project descriptor nested in each dashboard task."""

    model_config = _WIRE_CONFIG

    id: str
    name: str
    slug: str
    icon: str | None = None
    workspace_id: str


class DashboardTaskResponse(BaseModel):
    """One row of GET /dashboard/tasks."""

    model_config = _WIRE_CONFIG

    id: str
    title: str
    number: int | None = None
    description: str | None = None
    status: str
    priority: str | None = None
    due_date: datetime | None = None
    position: int | None = None
    created_at: datetime
    user_id: str | None = None
    project_id: str
    assignee_name: str | None = None
    assignee_id: str | None = None
    assignee_image: str | None = None
    labels: list[DashboardLabelResponse] = Field(default_factory=list)
    project: DashboardProjectResponse

    def to_wire(self) -> dict:
        """Serialize with camelCase keys and ISO-8601 datetimes."""
        return self.model_dump(mode="json", by_alias=True)
