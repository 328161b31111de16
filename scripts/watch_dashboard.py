"""Print the All Tasks dashboard in the terminal, refreshing on the poll interval.

Usage:
    uv run python -m scripts.watch_dashboard <token> [sort_field] [status]
sort_field is one of title, project, status, assignee, due_date (default due_date).
status optionally filters to one status (e.g. in-progress). Ctrl+C to stop.
"""

import asyncio
import locale
import logging
import sys

from app.client import (
    DashboardClient,
    DashboardPoller,
    FilterDimension,
    SortState,
    TaskListViewModel,
)
from app.client.presentation import (
    EMPTY_MESSAGE,
    EMPTY_TITLE,
    PAGE_TITLE,
    build_row,
    count_label,
    filter_chips,
)
from app.core.config import get_client_settings
from app.domain.enums import SortField, ViewState
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def render(view_model: TaskListViewModel) -> None:
    """Print the current state of the view model."""
    print(f"\n== {PAGE_TITLE} ==")
    if view_model.state is ViewState.LOADING:
        print("Loading...")
        return
    if view_model.state is ViewState.EMPTY:
        print(EMPTY_TITLE)
        print(EMPTY_MESSAGE)
        return
    chips = filter_chips(view_model.filters, view_model.facets)
    visible = view_model.visible_tasks
    print(" | ".join(c.label for c in chips) or "No filters", "-", count_label(len(visible)))
    for task in visible:
        row = build_row(task)
        title = f"{row.title} {row.number_label}" if row.number_label else row.title
        overdue = " (overdue)" if row.is_overdue else ""
        print(
            f"{title:<40} {row.project_name:<20} {row.status_name:<12} "
            f"{row.assignee_label:<20} {row.due_date_label}{overdue}"
        )


async def main() -> None:
    """Poll the dashboard endpoint and render after every refresh."""
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.watch_dashboard <token> [sort_field] [status]",
            file=sys.stderr,
        )
        sys.exit(1)
    token = sys.argv[1]
    setup_logging(logging.INFO)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("Could not apply the environment collation locale: %s", e)
    settings = get_client_settings()

    view_model = TaskListViewModel()
    if len(sys.argv) > 2:
        view_model.sort = SortState(SortField(sys.argv[2]))
    if len(sys.argv) > 3:
        view_model.toggle_filter(FilterDimension.STATUS, sys.argv[3])

    async with DashboardClient(token=token) as client:
        poller = DashboardPoller(client.get_all_tasks, view_model)
        try:
            while True:
                await poller.refresh()
                if poller.last_error is not None:
                    print(f"Refresh failed: {poller.last_error}", file=sys.stderr)
                render(view_model)
                await asyncio.sleep(settings.dashboard_poll_interval_seconds)
        finally:
            await poller.stop()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
