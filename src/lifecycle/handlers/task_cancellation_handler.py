from __future__ import annotations

import asyncio
from typing import List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from lifecycle.task_registry import TaskRegistry
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SHUTDOWN)


class TaskCancellationHandler(IShutdownHandler):
    """
    Shutdown handler for asyncio tasks.

    Cancels and awaits every task still tracked by TaskRegistry (timer
    tasks left behind by anything not stopped explicitly).

    Priority: 40
    """

    def __init__(self, exclude: Optional[List[asyncio.Task]] = None):
        """
        Args:
            exclude: Tasks that must survive (e.g. the task running shutdown itself)
        """
        self.exclude = exclude or []

    @property
    def shutdown_priority(self) -> int:
        """Tasks are cancelled after controllers."""
        return 40

    async def shutdown(self) -> None:
        current = asyncio.current_task()
        exclude = self.exclude + ([current] if current else [])
        tasks = TaskRegistry.instance().get_tasks_for_shutdown(exclude=exclude)

        log.info("Cancelling remaining background tasks...", count=len(tasks))

        for task in tasks:
            task.cancel()

        # Wait for all tasks to finish (either complete or raise CancelledError)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        log.debug("All tasks cancelled")
