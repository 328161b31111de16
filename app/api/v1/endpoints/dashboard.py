"""Dashboard API: tasks across every workspace the caller belongs to."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_all_tasks_use_case, get_current_user_id
from app.application.use_cases.dashboard import GetAllTasksUseCase
from app.core.limiter import limit_dashboard_reads
from app.schemas.dashboard import DashboardTaskResponse

router = APIRouter()


@router.get(
    "/tasks",
    response_model=list[DashboardTaskResponse],
    operation_id="getAllTasks",
    summary="Get all tasks across all workspaces the user has access to",
)
@limit_dashboard_reads
async def get_all_tasks(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    use_case: Annotated[GetAllTasksUseCase, Depends(get_all_tasks_use_case)],
) -> list[DashboardTaskResponse]:
    """List of all visible tasks with project, assignee and label information.

    No pagination; archived and planned tasks are included (the client hides them).
    """
    tasks = await use_case.get_all_tasks(user_id)
    return [DashboardTaskResponse.model_validate(t) for t in tasks]
