"""Fire-and-forget dispatch of status-change intents to the mutation subsystem."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from app.client.task_list import TaskStatusChange

logger = logging.getLogger(__name__)


class TaskStatusUpdater(Protocol):
    """Anything that can apply a status change (e.g. DashboardClient)."""

    async def update_task_status(self, change: TaskStatusChange) -> None:
        """Apply the change; raise on failure."""


class StatusChangeDispatcher:
    """Schedules status updates without waiting on them.

    Failures are logged and otherwise left to the mutation subsystem.
    on_success runs after a change is applied (e.g. to trigger a refresh).
    """

    def __init__(
        self,
        updater: TaskStatusUpdater,
        on_success: Callable[[TaskStatusChange], Awaitable[None]] | None = None,
    ) -> None:
        self.updater = updater
        self.on_success = on_success
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def dispatch(self, change: TaskStatusChange) -> asyncio.Task[None]:
        """Start applying the change in the background and return immediately."""
        task = asyncio.get_running_loop().create_task(self._apply(change))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _apply(self, change: TaskStatusChange) -> None:
        try:
            await self.updater.update_task_status(change)
        except Exception:
            logger.exception(
                "Status change for task %s to %s failed", change.task_id, change.status
            )
            return
        logger.info("Task %s moved to %s", change.task_id, change.status)
        if self.on_success is None:
            return
        try:
            await self.on_success(change)
        except Exception:
            logger.exception("Refresh after status change for task %s failed", change.task_id)

    async def drain(self) -> None:
        """Wait for every dispatched change to settle (shutdown and tests)."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
