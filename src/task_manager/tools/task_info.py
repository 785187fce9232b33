# src/task_manager/tools/task_info.py

from __future__ import annotations

from typing import Any

from ..core.state import AppState
from ..tasks.task_models import Task
from .registry import ToolResult
from .schemas import TaskInfoArgs

TASK_INFO = "task_info"
TITLE = "Get task info"
DESCRIPTION = "Returns full details for requested tasks"


def handle_task_info(state: AppState, args: TaskInfoArgs) -> ToolResult:
    tasks: list[Task] = []
    not_found: list[str] = []

    for task_id in args.task_ids:
        task = state.task_store.get(task_id)
        if task is None:
            not_found.append(task_id)
            continue
        tasks.append(task)

    res: dict[str, Any] = {
        "tasks": [t.to_dict() for t in tasks],
        "notFoundTasks": not_found,
    }

    # Ideal order only makes sense when every requested id resolved.
    if state.single_agent and not not_found:
        res["incompleteTasksIdealOrder"] = [
            t.task_id for t in state.task_store.incomplete_tasks_in_tree(args.task_ids[0])
        ]

    return ToolResult(structured=res)
