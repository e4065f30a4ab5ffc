# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path

from checklist_manager.tasks.task_file import SaveResult
from checklist_manager.tasks.task_models import Task


class FakeTaskFile:
    """
    In-memory TaskFileRepo.

    - load() returns copies of the seeded tasks
    - save() records each snapshot; fail_with turns every save into an error result
    """

    def __init__(self, tasks: list[Task] | None = None, *, fail_with: OSError | None = None) -> None:
        self._path = Path("fake-checklist.txt")
        self._seed = list(tasks or [])
        self.fail_with = fail_with
        self.saves: list[list[Task]] = []

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        return [replace(t) for t in self._seed]

    def save(self, tasks: Iterable[Task]) -> SaveResult:
        snapshot = [replace(t) for t in tasks]
        self.saves.append(snapshot)
        if self.fail_with is not None:
            return SaveResult(path=self._path, count=0, error=self.fail_with)
        return SaveResult(path=self._path, count=len(snapshot))


@dataclass(slots=True)
class ScriptedConsole:
    """
    Deterministic stand-in for input()/print().

    read_line pops the next scripted answer; once the script runs out it raises
    `on_empty` (EOFError for Ctrl+D, KeyboardInterrupt for Ctrl+C).
    """

    script: list[str]
    on_empty: type[BaseException] = EOFError
    prompts: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.script:
            raise self.on_empty
        return self.script.pop(0)

    def emit(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)
