# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from checklist_manager.config import Settings
from checklist_manager.tasks.task_store import ChecklistStore


@pytest.fixture()
def checklist_path(tmp_path: Path) -> Path:
    return tmp_path / "checklist.txt"


@pytest.fixture()
def settings(checklist_path: Path) -> Settings:
    """
    Settings pointing at a per-test checklist file.

    Built directly instead of from_env() to keep tests independent of the
    developer's environment and .env file.
    """
    return Settings(checklist_file=checklist_path, log_level="WARNING", log_dir=None)


@pytest.fixture()
def store(checklist_path: Path) -> ChecklistStore:
    return ChecklistStore(checklist_path)
