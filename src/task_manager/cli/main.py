# src/task_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves MCP over stdio
until the client closes the stream.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from ..server import create_server, run_stdio

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "task-manager"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    server = create_server(state)

    try:
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye. tasks=%d", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
