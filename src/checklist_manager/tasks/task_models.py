# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskOutcome(StrEnum):
    """
    Result of a store mutation.

    Notes:
    - NOT_FOUND is a normal outcome, not an error: the store is left untouched.
    """

    REMOVED = "removed"
    TOGGLED = "toggled"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def is_completed(self) -> bool:
        return self.completed

    def toggle_complete(self) -> None:
        self.completed = not self.completed

    def set_description(self, description: str) -> None:
        self.description = description
