"""Settings validation."""

import pytest
from pydantic import ValidationError

from app.client import DashboardClient, DashboardPoller, TaskListViewModel
from app.core.config import ClientSettings, Settings, get_client_settings, get_settings


@pytest.fixture
def client_only_env(monkeypatch: pytest.MonkeyPatch):
    """Environment of a dashboard client host: no server secrets at all."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.setenv("DASHBOARD_API_BASE_URL", "https://tasks.example.com")
    monkeypatch.setenv("DASHBOARD_POLL_INTERVAL_SECONDS", "5")
    get_settings.cache_clear()
    get_client_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_client_settings.cache_clear()


def test_missing_secret_key_rejected() -> None:
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(database_url="postgresql+asyncpg://x/y", secret_key="", _env_file=None)


def test_missing_database_url_allowed() -> None:
    settings = Settings(database_url="", secret_key="k", _env_file=None)
    assert settings.database_url == ""


def test_poll_interval_must_be_positive() -> None:
    with pytest.raises(ValidationError, match="dashboard_poll_interval_seconds"):
        ClientSettings(dashboard_poll_interval_seconds=0, _env_file=None)


def test_request_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError, match="dashboard_request_timeout_seconds"):
        ClientSettings(dashboard_request_timeout_seconds=-1, _env_file=None)


def test_unknown_exporter_rejected() -> None:
    with pytest.raises(ValidationError, match="telemetry_exporter"):
        Settings(
            database_url="postgresql+asyncpg://x/y",
            secret_key="k",
            telemetry_exporter="jaeger",
            _env_file=None,
        )


def test_defaults() -> None:
    settings = Settings(database_url="postgresql+asyncpg://x/y", secret_key="k", _env_file=None)
    assert settings.dashboard_rate_limit == "120/minute"
    assert settings.algorithm == "HS256"
    client_settings = ClientSettings(_env_file=None)
    assert client_settings.dashboard_poll_interval_seconds == 10.0
    assert client_settings.dashboard_request_timeout_seconds == 30.0
    assert client_settings.dashboard_api_base_url == "http://localhost:8000"


async def test_client_builds_without_server_settings(client_only_env: None) -> None:
    async with DashboardClient(token="tok") as client:
        assert client._http.base_url.host == "tasks.example.com"
        poller = DashboardPoller(client.get_all_tasks, TaskListViewModel())
        assert poller.interval_seconds == 5.0
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        get_settings()
