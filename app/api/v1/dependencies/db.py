"""DB-backed dependencies (composition root): repositories and use cases."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.dashboard import GetAllTasksUseCase
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import DashboardRepository


async def get_dashboard_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DashboardRepository:
    """Dashboard read repository bound to the request session."""
    return DashboardRepository(db)


async def get_all_tasks_use_case(
    dashboard_repo: Annotated[DashboardRepository, Depends(get_dashboard_repo)],
) -> GetAllTasksUseCase:
    """All Tasks aggregation use case (composition root)."""
    return GetAllTasksUseCase(dashboard_repo)
