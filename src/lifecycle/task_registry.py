"""
Task Registry
-------------

Centralized tracking of asyncio tasks created across the application
(timer tasks of the scheduler, host loop tasks).

Features:
- Register tasks with metadata (category, description)
- Track completion state, cancellation, errors
- Introspection API for debugging and the shutdown coordinator

Timer tasks are short-lived and numerous (one per fade), so records of
tasks that finish cleanly or are cancelled are dropped on completion.
Failed tasks are kept for inspection.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Dict, List, Optional

from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.TASK)


# ---------------------------------------------------------------------------
# TASK CATEGORY ENUM
# ---------------------------------------------------------------------------

class TaskCategory(Enum):
    """Logical grouping of asynchronous tasks."""
    ANIMATION = auto()    # Update-cycle and fade step timers
    BACKGROUND = auto()


# ---------------------------------------------------------------------------
# TASK METADATA
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TaskInfo:
    """Immutable metadata captured at task creation time."""
    id: int
    category: TaskCategory
    description: str
    created_at: str  # ISO UTC string
    created_by: Optional[str] = None


@dataclass
class TaskRecord:
    """Internal structure tracking task state."""
    task: asyncio.Task
    info: TaskInfo
    cancelled: bool = False
    finished_with_error: Optional[BaseException] = None
    finished_at: Optional[str] = None


# ---------------------------------------------------------------------------
# TASK REGISTRY SINGLETON
# ---------------------------------------------------------------------------

class TaskRegistry:
    """
    Global registry for asyncio tasks in the application.

    Responsibilities:
    - Track tasks and metadata
    - Detect and log task failures
    - Assist shutdown coordinator by exposing active tasks
    """

    _instance: Optional["TaskRegistry"] = None

    def __init__(self) -> None:
        self._records: Dict[int, TaskRecord] = {}
        self._by_task: Dict[asyncio.Task, int] = {}
        self._next_id: int = 1

    # -----------------------------
    # Singleton accessor
    # -----------------------------
    @classmethod
    def instance(cls) -> "TaskRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton (tests)."""
        cls._instance = None

    # -----------------------------
    # Register new task
    # -----------------------------
    def register(
        self,
        task: asyncio.Task,
        category: TaskCategory,
        description: str,
        created_by: Optional[str] = None
    ) -> int:
        """Register a new task with metadata."""
        task_id = self._next_id
        self._next_id += 1

        info = TaskInfo(
            id=task_id,
            category=category,
            description=description,
            created_at=datetime.now(timezone.utc).isoformat(),
            created_by=created_by,
        )

        self._records[task_id] = TaskRecord(task=task, info=info)
        self._by_task[task] = task_id

        log.debug(f"[Task {task_id}] Registered ({category.name}) - {description}")

        # Auto-attach callback to track completion
        task.add_done_callback(self._on_task_done)

        return task_id

    # -----------------------------
    # Internal completion handler
    # -----------------------------
    def _on_task_done(self, task: asyncio.Task) -> None:
        task_id = self._by_task.pop(task, None)
        if task_id is None:
            return
        record = self._records[task_id]
        record.finished_at = datetime.now(timezone.utc).isoformat()

        if task.cancelled():
            record.cancelled = True
            log.debug(f"[Task {task_id}] Cancelled")
            del self._records[task_id]
            return

        exc = task.exception()
        if exc:
            record.finished_with_error = exc
            log.error(f"[Task {task_id}] FAILED: {exc}", description=record.info.description)
        else:
            log.debug(f"[Task {task_id}] Completed successfully")
            del self._records[task_id]

    # -----------------------------
    # Public API
    # -----------------------------

    def active(self) -> List[TaskRecord]:
        """Return only tasks that are still running."""
        return [r for r in self._records.values() if not r.task.done()]

    def failed(self) -> List[TaskRecord]:
        """Return tasks that ended with an exception."""
        return [r for r in self._records.values() if r.finished_with_error is not None]

    def summary(self) -> str:
        """Return human-readable summary for logs."""
        return (
            f"Tasks: tracked={len(self._records)}, running={len(self.active())}, "
            f"failed={len(self.failed())}"
        )

    # -----------------------------
    # Shutdown helpers
    # -----------------------------

    def get_tasks_for_shutdown(
        self,
        exclude: Optional[List[asyncio.Task]] = None
    ) -> List[asyncio.Task]:
        """Return all tasks that should be cancelled during shutdown."""
        exclude = exclude or []
        tasks = [
            r.task for r in self._records.values()
            if not r.task.done() and r.task not in exclude
        ]

        log.debug(f"Shutdown: {len(tasks)} tasks to cancel")
        return tasks


# ---------------------------------------------------------------------------
# Convenience wrapper function
# ---------------------------------------------------------------------------

def create_tracked_task(
    coro,
    *,
    category: TaskCategory,
    description: str,
    loop: Optional[asyncio.AbstractEventLoop] = None
) -> asyncio.Task:
    """
    Create and register a task in a single call.
    """
    loop = loop or asyncio.get_running_loop()
    task = loop.create_task(coro)

    TaskRegistry.instance().register(
        task=task,
        category=category,
        description=description
    )

    return task
