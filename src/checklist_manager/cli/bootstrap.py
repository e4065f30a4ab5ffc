# src/checklist_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- ensures the directory of the checklist file exists,
- builds the ChecklistStore.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_store import ChecklistStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.checklist_file.parent.mkdir(parents=True, exist_ok=True)


def create_store(*, settings: Settings | None = None) -> ChecklistStore:
    """
    Create the ChecklistStore from the provided settings.

    Raises OSError if the checklist file cannot be prepared or read.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    logger.debug("Using checklist file %s", settings.checklist_file)
    _ensure_local_dirs(settings)
    return ChecklistStore(settings.checklist_file)
