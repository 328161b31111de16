"""Liveness response."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """GET /health. Never touches the database."""

    status: str = "ok"
    service: str
    version: str
