"""Periodic refresh of the All Tasks list with last-write-wins semantics."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable, Sequence

from app.client.task_list import TaskListViewModel
from app.core.config import get_client_settings
from app.schemas.dashboard import DashboardTaskResponse

logger = logging.getLogger(__name__)

FetchTasks = Callable[[], Awaitable[Sequence[DashboardTaskResponse]]]


class DashboardPoller:
    """Refreshes a TaskListViewModel on a fixed interval.

    Every refresh gets a sequence number; a response is applied only if no
    newer request has already been applied, so a slow stale response never
    overwrites a fresher list. A failed refresh keeps the current list and
    is exposed through last_error.
    """

    def __init__(
        self,
        fetch: FetchTasks,
        view_model: TaskListViewModel,
        interval_seconds: float | None = None,
    ) -> None:
        self.fetch = fetch
        self.view_model = view_model
        self.interval_seconds = (
            interval_seconds
            if interval_seconds is not None
            else get_client_settings().dashboard_poll_interval_seconds
        )
        self.last_error: Exception | None = None
        self._issued = 0
        self._applied = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh(self) -> bool:
        """Fetch once; return True if the response was applied to the view model."""
        self._issued += 1
        seq = self._issued
        try:
            tasks = await self.fetch()
        except Exception as e:
            logger.warning("Dashboard refresh %d failed: %s", seq, e)
            # Failures older than the applied response are stale.
            if seq > self._applied:
                self.last_error = e
            return False
        if seq < self._applied:
            logger.debug("Discarding stale dashboard response %d (have %d)", seq, self._applied)
            return False
        self._applied = seq
        self.last_error = None
        self.view_model.set_tasks(tasks)
        return True

    async def _run(self) -> None:
        while True:
            await self.refresh()
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Dashboard polling every %.1fs", self.interval_seconds)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
