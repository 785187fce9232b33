# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace

import pytest

from task_manager.core.state import AppState
from task_manager.tasks.task_models import Task, TaskStatus
from task_manager.tasks.task_store import TaskStore

TaskFactory = Callable[..., Task]


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the server.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-manager-test",
        log_level="DEBUG",
        log_dir=None,
        single_agent=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState in single-agent mode with a fresh store."""
    return AppState(settings=settings, task_store=store, single_agent=True)


@pytest.fixture()
def multi_agent_state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, single_agent=False)


@pytest.fixture()
def make_task(store: TaskStore) -> TaskFactory:
    """
    Create a task with a readable id and put it in the store.

    make_task("A", deps=["B"], critical=True, status=TaskStatus.DONE)
    """

    def _make(
        task_id: str,
        *,
        deps: list[str] | None = None,
        critical: bool = False,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        task = Task(
            task_id=task_id,
            status=status,
            title=f"Task {task_id}",
            description=f"Description of {task_id}",
            goal=f"Goal of {task_id}",
            depends_on_task_ids=list(deps or []),
            definitions_of_done=[f"{task_id} is done"],
            critical_path=critical,
        )
        store.set(task_id, task)
        return task

    return _make
