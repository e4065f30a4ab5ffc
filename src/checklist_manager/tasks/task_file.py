# tasks/task_file.py

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

# "<id> <flag>" optionally followed by one separator character and the description (rest of line).
_RECORD_RE = re.compile(r"^\s*([+-]?\d+)\s+([+-]?\d+)(?:\s(.*))?$")


def parse_record(line: str) -> Task | None:
    """Parse one line into a Task. Returns None if the line is not a record."""
    m = _RECORD_RE.match(line.rstrip("\n"))
    if not m:
        return None
    task_id, flag, description = m.groups()
    return Task(id=int(task_id), description=description or "", completed=int(flag) != 0)


def format_record(task: Task) -> str:
    flag = 1 if task.completed else 0
    return f"{task.id} {flag} {task.description}\n"


@dataclass(frozen=True, slots=True)
class SaveResult:
    path: Path
    count: int
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class ChecklistFile:
    """
    Line-oriented checklist file.

    Format (one task per line, no header):
        <id> <0|1> <description>

    Descriptions are written as-is. A description containing a line break
    will not survive a reload.
    """

    def __init__(self, path: str | Path = "checklist.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read all tasks.

        - missing file -> []
        - blank lines are skipped
        - the first malformed line stops reading; earlier tasks are kept
        - other OSErrors (permissions, directory instead of file) propagate
        """
        tasks: list[Task] = []
        try:
            f = self._path.open("rb")
        except FileNotFoundError:
            logger.debug("Checklist file %s does not exist yet; starting empty.", self._path)
            return tasks

        with f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError:
                    logger.warning(
                        "Stopped reading %s at line %d: not valid UTF-8; kept %d task(s).",
                        self._path,
                        lineno,
                        len(tasks),
                    )
                    break
                if not line.strip():
                    continue
                task = parse_record(line)
                if task is None:
                    logger.warning(
                        "Stopped reading %s at malformed line %d; kept %d task(s).",
                        self._path,
                        lineno,
                        len(tasks),
                    )
                    break
                tasks.append(task)

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> SaveResult:
        """Truncate the file and write every task in order. I/O errors are returned, not raised."""
        items = list(tasks)
        try:
            with self._path.open("w", encoding="utf-8", newline="\n") as f:
                for task in items:
                    f.write(format_record(task))
        except OSError as e:
            return SaveResult(path=self._path, count=0, error=e)

        logger.debug("Wrote %d task(s) to %s", len(items), self._path)
        return SaveResult(path=self._path, count=len(items))
