# src/checklist_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the ChecklistStore, runs the console menu,
then flushes the checklist to disk on the way out.

Exit codes:
- 0: normal exit (also when the final save failed; that is logged)
- 1: startup error (checklist file or its directory is unusable)
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_store
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..core.ports import Emitter, LineReader
from ..logging_setup import setup_logging
from ..tasks.task_store import ChecklistStore

logger = logging.getLogger(__name__)


def _shutdown(store: ChecklistStore) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        store.close()
    except Exception:
        logger.exception("Failed to save the checklist.")


def main(
    settings: Settings | None = None,
    *,
    read_line: LineReader = input,
    emit: Emitter = print,
) -> int:
    if settings is None:
        settings = get_settings()

    setup_logging(log_dir=settings.log_dir, console_level=settings.console_log_level)

    try:
        store = create_store(settings=settings)
    except OSError as e:
        logger.error("Error: %s", e)
        return 1

    try:
        run_console_loop(store, read_line=read_line, emit=emit)
    finally:
        _shutdown(store)
        logger.info("Bye.")

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
