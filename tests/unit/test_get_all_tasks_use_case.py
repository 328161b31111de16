"""GetAllTasksUseCase unit tests with mocked and in-memory repositories."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.dashboard import LabelRow, TaskRow
from app.application.use_cases.dashboard import GetAllTasksUseCase, group_labels_by_task
from app.client.task_list import TaskListViewModel
from app.schemas.dashboard import DashboardTaskResponse

_T0 = datetime(2025, 1, 1, tzinfo=UTC)


def _row(
    task_id: str,
    project_id: str = "p1",
    workspace_id: str = "w1",
    status: str = "to-do",
    user_id: str | None = None,
    assignee_name: str | None = None,
    created_offset: int = 0,
) -> TaskRow:
    return TaskRow(
        id=task_id,
        title=f"Task {task_id}",
        number=1,
        description=None,
        status=status,
        priority=None,
        due_date=None,
        position=None,
        created_at=_T0 + timedelta(minutes=created_offset),
        user_id=user_id,
        project_id=project_id,
        assignee_name=assignee_name,
        assignee_id=user_id if assignee_name else None,
        assignee_image=None,
        project_name=f"Project {project_id}",
        project_slug=project_id.upper(),
        project_icon=None,
        workspace_id=workspace_id,
    )


class InMemoryDashboardRepository:
    """Tiny dataset: u1 belongs to w1 only; w2 holds a task u1 must not see."""

    def __init__(self) -> None:
        self.memberships = {"u1": ["w1"], "u2": ["w2"]}
        self.projects = {"p1": "w1", "p2": "w2"}
        self.rows = [
            _row("t1", "p1", "w1", created_offset=0),
            _row("t2", "p2", "w2", created_offset=1),
            _row("t3", "p1", "w1", status="archived", created_offset=2),
        ]
        self.labels = [
            LabelRow(id="l1", name="bug", color="#f00", task_id="t1"),
            LabelRow(id="l2", name="ops", color="#0f0", task_id="t2"),
        ]

    async def list_workspace_ids_for_user(self, user_id):
        return list(self.memberships.get(user_id, []))

    async def list_project_ids_for_workspaces(self, workspace_ids):
        return [p for p, w in self.projects.items() if w in workspace_ids]

    async def list_tasks_for_projects(self, project_ids):
        return [r for r in self.rows if r.project_id in project_ids]

    async def list_labels_for_tasks(self, task_ids):
        return [label for label in self.labels if label.task_id in task_ids]


@pytest.fixture
def mock_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_workspace_ids_for_user.return_value = ["w1"]
    repo.list_project_ids_for_workspaces.return_value = ["p1"]
    repo.list_tasks_for_projects.return_value = [_row("t1")]
    repo.list_labels_for_tasks.return_value = []
    return repo


async def test_no_workspaces_returns_empty_without_further_queries(mock_repo: AsyncMock) -> None:
    """A user with no memberships costs exactly one query."""
    mock_repo.list_workspace_ids_for_user.return_value = []
    result = await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")
    assert result == []
    mock_repo.list_project_ids_for_workspaces.assert_not_called()
    mock_repo.list_tasks_for_projects.assert_not_called()
    mock_repo.list_labels_for_tasks.assert_not_called()


async def test_no_projects_returns_empty(mock_repo: AsyncMock) -> None:
    """Workspaces without projects stop the fan-out before the task query."""
    mock_repo.list_project_ids_for_workspaces.return_value = []
    result = await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")
    assert result == []
    mock_repo.list_project_ids_for_workspaces.assert_awaited_once_with(["w1"])
    mock_repo.list_tasks_for_projects.assert_not_called()
    mock_repo.list_labels_for_tasks.assert_not_called()


async def test_no_tasks_skips_label_query(mock_repo: AsyncMock) -> None:
    mock_repo.list_tasks_for_projects.return_value = []
    result = await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")
    assert result == []
    mock_repo.list_labels_for_tasks.assert_not_called()


async def test_labels_attached_in_retrieval_order(mock_repo: AsyncMock) -> None:
    """Each task carries exactly its own labels; unlabeled tasks get an empty list."""
    mock_repo.list_tasks_for_projects.return_value = [_row("t1"), _row("t2", created_offset=1)]
    mock_repo.list_labels_for_tasks.return_value = [
        LabelRow(id="l2", name="urgent", color="#f00", task_id="t1"),
        LabelRow(id="l1", name="backend", color="#00f", task_id="t1"),
    ]
    result = await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")
    mock_repo.list_labels_for_tasks.assert_awaited_once_with(["t1", "t2"])
    assert [t.id for t in result] == ["t1", "t2"]
    assert [label.id for label in result[0].labels] == ["l2", "l1"]
    assert result[1].labels == []


async def test_project_descriptor_nested(mock_repo: AsyncMock) -> None:
    result = await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")
    project = result[0].project
    assert project.id == "p1"
    assert project.name == "Project p1"
    assert project.slug == "P1"
    assert project.workspace_id == "w1"


async def test_stale_assignee_keeps_task_with_null_assignee(mock_repo: AsyncMock) -> None:
    """A user_id that no longer resolves leaves the task in place, unassigned."""
    mock_repo.list_tasks_for_projects.return_value = [_row("t1", user_id="ghost")]
    result = await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")
    assert len(result) == 1
    assert result[0].user_id == "ghost"
    assert result[0].assignee_id is None
    assert result[0].assignee_name is None
    assert result[0].assignee_image is None


async def test_repository_errors_propagate(mock_repo: AsyncMock) -> None:
    mock_repo.list_tasks_for_projects.side_effect = RuntimeError("connection lost")
    with pytest.raises(RuntimeError, match="connection lost"):
        await GetAllTasksUseCase(mock_repo).get_all_tasks("u1")


async def test_only_member_workspaces_are_visible() -> None:
    """Tasks in workspaces the user is not a member of never appear."""
    repo = InMemoryDashboardRepository()
    result = await GetAllTasksUseCase(repo).get_all_tasks("u1")
    assert {t.project.workspace_id for t in result} == {"w1"}
    assert "t2" not in {t.id for t in result}


async def test_archived_tasks_returned_by_server() -> None:
    """Archived tasks come back from the aggregation; hiding them is the view's job."""
    repo = InMemoryDashboardRepository()
    result = await GetAllTasksUseCase(repo).get_all_tasks("u1")
    assert [t.id for t in result] == ["t1", "t3"]
    assert result[1].status == "archived"


async def test_archived_task_hidden_by_view_model() -> None:
    """Fetched list flows through the wire model into the view; archived is dropped."""
    repo = InMemoryDashboardRepository()
    repo.rows.append(_row("t4", "p1", "w1", created_offset=3))
    tasks = await GetAllTasksUseCase(repo).get_all_tasks("u1")
    assert len(tasks) == 3

    vm = TaskListViewModel([DashboardTaskResponse.model_validate(t) for t in tasks])
    assert [t.id for t in vm.visible_tasks] == ["t1", "t4"]


def test_group_labels_by_task_skips_unattached() -> None:
    index = group_labels_by_task(
        [
            LabelRow(id="l1", name="a", color="#000", task_id="t1"),
            LabelRow(id="l2", name="b", color="#111", task_id=None),
            LabelRow(id="l3", name="c", color="#222", task_id="t1"),
        ]
    )
    assert list(index) == ["t1"]
    assert [label.id for label in index["t1"]] == ["l1", "l3"]
