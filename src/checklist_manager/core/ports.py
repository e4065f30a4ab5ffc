# src/checklist_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the store and the console.

The store depends on a Protocol instead of the concrete file adapter,
and the menu handlers only see the TaskRepo surface of the store.
This keeps persistence swappable and makes testing easier.
"""

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_file import SaveResult
    from ..tasks.task_models import Task, TaskOutcome

LineReader = Callable[[str], str]
# input()-compatible: shows a prompt, returns one line without the newline, raises EOFError.

Emitter = Callable[[str], None]
# print()-compatible: writes one user-facing line.


class TaskFileRepo(Protocol):
    """Load/save boundary between the store and its backing file."""

    @property
    def path(self) -> Path: ...

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> SaveResult: ...


class TaskRepo(Protocol):
    """What the menu handlers need from the store."""

    def add_task(self, description: str) -> Task: ...
    def remove_task(self, task_id: int) -> TaskOutcome: ...
    def toggle_task(self, task_id: int) -> TaskOutcome: ...
    def list_tasks(self) -> tuple[Task, ...]: ...
