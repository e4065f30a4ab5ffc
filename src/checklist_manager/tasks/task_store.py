# tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from ..core.ports import TaskFileRepo
from .task_file import ChecklistFile, SaveResult
from .task_models import Task, TaskOutcome

logger = logging.getLogger(__name__)


class ChecklistStore:
    """
    In-memory checklist backed by a line-oriented file.

    Lifecycle:
    - tasks are loaded once, in the constructor
    - mutations only touch memory
    - close() (or leaving the `with` block) flushes to disk, best-effort

    Ids:
    - next_id starts at max(loaded ids) + 1, never below 1
    - ids are never handed out twice by the same store instance
    """

    def __init__(
        self,
        path: str | Path = "checklist.txt",
        *,
        task_file: TaskFileRepo | None = None,
    ) -> None:
        self._file: TaskFileRepo = task_file if task_file is not None else ChecklistFile(path)
        self._tasks: list[Task] = list(self._file.load())
        self._next_id = max([0, *(t.id for t in self._tasks)]) + 1
        self._closed: SaveResult | None = None
        logger.info(
            "ChecklistStore ready path=%s total=%d next_id=%d",
            self._file.path,
            len(self._tasks),
            self._next_id,
        )

    def __len__(self) -> int:
        return len(self._tasks)

    def __enter__(self) -> ChecklistStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def path(self) -> Path:
        return self._file.path

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- public API ----

    def add_task(self, description: str) -> Task:
        task = Task(id=self._next_id, description=description)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s", task.id)
        return task

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def remove_task(self, task_id: int) -> TaskOutcome:
        kept = [t for t in self._tasks if t.id != task_id]
        if len(kept) == len(self._tasks):
            logger.debug("remove_task: id=%s not found", task_id)
            return TaskOutcome.NOT_FOUND
        self._tasks = kept
        logger.debug("Task removed id=%s", task_id)
        return TaskOutcome.REMOVED

    def toggle_task(self, task_id: int) -> TaskOutcome:
        task = self.get_task(task_id)
        if task is None:
            logger.debug("toggle_task: id=%s not found", task_id)
            return TaskOutcome.NOT_FOUND
        task.toggle_complete()
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return TaskOutcome.TOGGLED

    def list_tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in insertion order."""
        return tuple(self._tasks)

    # ---- persistence ----

    def flush(self) -> SaveResult:
        """Write the current tasks to disk. Failures are logged and returned, never raised."""
        result = self._file.save(self._tasks)
        if result.ok:
            logger.info("Saved %d task(s) to %s", result.count, result.path)
        else:
            logger.error("Error saving tasks to %s: %s", result.path, result.error)
        return result

    def close(self) -> SaveResult:
        """Final flush. Safe to call more than once; only the first call writes."""
        if self._closed is None:
            self._closed = self.flush()
        return self._closed
