# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from checklist_manager.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("CHECKLIST_FILE", "CHECKLIST_LOG_LEVEL", "CHECKLIST_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.checklist_file == Path("checklist.txt")
    assert s.log_level == "WARNING"
    assert s.console_log_level == logging.WARNING
    assert s.log_dir is None


def test_values_from_environment(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("CHECKLIST_FILE", str(tmp_path / "todo.txt"))
    clean_env.setenv("CHECKLIST_LOG_LEVEL", "debug")
    clean_env.setenv("CHECKLIST_LOG_DIR", str(tmp_path / "logs"))

    s = Settings.from_env()

    assert s.checklist_file == tmp_path / "todo.txt"
    assert s.console_log_level == logging.DEBUG
    assert s.log_dir == tmp_path / "logs"


def test_bad_values_fall_back_to_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("CHECKLIST_FILE", "   ")
    clean_env.setenv("CHECKLIST_LOG_LEVEL", "chatty")

    s = Settings.from_env()

    assert s.checklist_file == Path("checklist.txt")
    assert s.log_level == "WARNING"
