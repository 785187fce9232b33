# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    single_agent = bool(getattr(settings, "single_agent", False))
    if single_agent:
        logger.info("Running in single agent mode")
    else:
        logger.info("Running in multi-agent mode")

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        single_agent=single_agent,
    )
