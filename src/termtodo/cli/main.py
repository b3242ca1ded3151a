# src/termtodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, migrates the database, shows the command banner, then
runs the list view until Ctrl+C.
"""

from __future__ import annotations

import logging
import sys
import time

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.terminal_connector import open_terminal
from ..logging_setup import setup_logging
from ..tasks.errors import StoreError
from ..ui.banner import show_command_banner
from ..ui.list_session import ListSession

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (db=%s)...", settings.app_name, settings.db_path)

    try:
        state = create_initial_state(settings=settings)
    except StoreError as e:
        logger.exception("Database migration failed; refusing to start.")
        print(f"{settings.app_name}: database migration failed: {e}", file=sys.stderr)
        print(f"See {log_file} for details.", file=sys.stderr)
        return 1

    try:
        with open_terminal() as (render, keys):
            show_command_banner(render)
            time.sleep(settings.banner_seconds)

            session = ListSession(
                state.task_store,
                render,
                keys,
                cursor_mode=settings.cursor_mode,
                notice_seconds=settings.notice_seconds,
            )
            session.run()
    except StoreError as e:
        logger.exception("Database error in list view.")
        print(f"{settings.app_name}: database error: {e}", file=sys.stderr)
        return 1
    except EOFError:
        logger.info("Terminal input closed, exiting.")
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
    finally:
        state.task_store.close()

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
