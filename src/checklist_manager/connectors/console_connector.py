# src/checklist_manager/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import MenuAction, MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.ports import Emitter, LineReader, TaskRepo

logger = logging.getLogger(__name__)


def run_console_loop(
    store: TaskRepo,
    *,
    read_line: LineReader = input,
    emit: Emitter = print,
    registry: MenuRegistry = menu_registry,
) -> None:
    """
    Menu loop: show the menu, read a choice, dispatch, repeat.

    Ends on the Exit choice, on EOF and on Ctrl+C. Saving is the caller's job.
    """
    logger.info("Console connector started.")

    while True:
        emit(registry.build_menu())
        try:
            raw_choice = read_line("Choice: ")
            action = registry.handle(store, raw_choice, read_line, emit)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            emit("Saving and exiting...")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            emit("Internal error while handling a command.")
            continue

        if action is MenuAction.EXIT:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
