# src/checklist_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.ports import Emitter, LineReader, TaskRepo
from ..tasks.task_models import TaskOutcome

logger = logging.getLogger(__name__)

MENU_TITLE = "--- Checklist Manager ---"
LIST_HEADER = "=== CHECKLIST ==="
LIST_FOOTER = "================="


class MenuAction(StrEnum):
    CONTINUE = "continue"
    EXIT = "exit"


MenuHandler = Callable[[TaskRepo, LineReader, Emitter], MenuAction]


class MenuRegistry:
    """Numbered menu used by the console connector (1. Add Task, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, choice: int, label: str, handler: MenuHandler) -> None:
        self._handlers[choice] = handler
        self._labels[choice] = label

    def choices(self) -> list[int]:
        return sorted(self._handlers)

    def build_menu(self) -> str:
        lines = ["", MENU_TITLE]
        for choice in self.choices():
            lines.append(f"{choice}. {self._labels[choice]}")
        return "\n".join(lines)

    def handle(
        self,
        store: TaskRepo,
        raw_choice: str,
        read_line: LineReader,
        emit: Emitter,
    ) -> MenuAction:
        """
        Dispatch one menu choice.
        Unknown or non-numeric choices print "Invalid choice!" and keep the loop going.
        """
        choice = parse_int(raw_choice)
        handler = self._handlers.get(choice) if choice is not None else None
        if handler is None:
            logger.debug("Invalid menu choice %r", raw_choice)
            emit("Invalid choice!")
            return MenuAction.CONTINUE
        return handler(store, read_line, emit)


def parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def format_task_line(task) -> str:
    mark = "[X]" if task.completed else "[ ]"
    return f"[{task.id}] {mark} {task.description}"


def _read_task_id(prompt: str, read_line: LineReader, emit: Emitter) -> int | None:
    task_id = parse_int(read_line(prompt))
    if task_id is None:
        emit("Invalid task ID!")
    return task_id


def cmd_add(store: TaskRepo, read_line: LineReader, emit: Emitter) -> MenuAction:
    description = read_line("Enter task description: ")
    store.add_task(description)
    emit("Task added successfully!")
    return MenuAction.CONTINUE


def cmd_remove(store: TaskRepo, read_line: LineReader, emit: Emitter) -> MenuAction:
    task_id = _read_task_id("Enter task ID to remove: ", read_line, emit)
    if task_id is None:
        return MenuAction.CONTINUE
    if store.remove_task(task_id) is TaskOutcome.REMOVED:
        emit("Task removed successfully!")
    else:
        emit("Task not found!")
    return MenuAction.CONTINUE


def cmd_toggle(store: TaskRepo, read_line: LineReader, emit: Emitter) -> MenuAction:
    task_id = _read_task_id("Enter task ID to toggle: ", read_line, emit)
    if task_id is None:
        return MenuAction.CONTINUE
    if store.toggle_task(task_id) is TaskOutcome.TOGGLED:
        emit("Task status toggled!")
    else:
        emit("Task not found!")
    return MenuAction.CONTINUE


def cmd_list(store: TaskRepo, read_line: LineReader, emit: Emitter) -> MenuAction:
    tasks = store.list_tasks()
    if not tasks:
        emit("\nNo tasks in the checklist.")
        return MenuAction.CONTINUE

    lines = ["", LIST_HEADER]
    lines.extend(format_task_line(t) for t in tasks)
    lines.append(LIST_FOOTER)
    emit("\n".join(lines))
    return MenuAction.CONTINUE


def cmd_exit(store: TaskRepo, read_line: LineReader, emit: Emitter) -> MenuAction:
    emit("Saving and exiting...")
    return MenuAction.EXIT


registry = MenuRegistry()

registry.register(1, "Add Task", cmd_add)
registry.register(2, "Remove Task", cmd_remove)
registry.register(3, "Toggle Task", cmd_toggle)
registry.register(4, "List Tasks", cmd_list)
registry.register(5, "Exit", cmd_exit)
