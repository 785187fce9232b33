# src/task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the tool layer.

Handlers depend on this Protocol instead of the concrete TaskStore,
which keeps them easy to test against small fakes.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Records
    def set(self, task_id: str, task: Task) -> None: ...
    def get(self, task_id: str) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...

    # Single-agent workflow pointer
    def set_current_task(self, task_id: str) -> None: ...
    def get_current_task(self) -> str | None: ...

    # Dependency graph queries
    def get_all_in_tree(self, task_id: str) -> list[Task]: ...
    def incomplete_tasks_in_tree(self, task_id: str) -> list[Task]: ...
