# src/task_manager/tools/create_task.py

from __future__ import annotations

import logging
from typing import Any

import mcp.types as types

from ..core.state import AppState
from ..tasks.task_models import Task, TaskStatus, must_decompose, new_task_id, to_basic_task_info
from .registry import ToolResult, assistant_text
from .schemas import CreateTaskArgs

logger = logging.getLogger(__name__)

CREATE_TASK = "create_task"
TITLE = "Create task"
DESCRIPTION = """Creates a new task that must be executed.
If decomposing a complex task is required, must use 'decompose_task' first before executing it.
All tasks start in the todo status.
Must use 'update_task' before executing this task, and when executing this task has finished."""


def task_from_args(args: CreateTaskArgs) -> Task:
    """Build a fresh todo Task (no dependencies yet) from create/subtask arguments."""
    return Task(
        task_id=new_task_id(),
        status=TaskStatus.TODO,
        title=args.title,
        description=args.description,
        goal=args.goal,
        depends_on_task_ids=[],
        definitions_of_done=list(args.definitions_of_done),
        critical_path=bool(args.critical_path),
        uncertainty_areas=[a.to_model() for a in args.uncertainty_areas],
        estimated_complexity=args.estimated_complexity.to_model(),
    )


def task_resource_link(task: Task) -> types.ResourceLink:
    return types.ResourceLink(
        type="resource_link",
        uri=f"task://{task.task_id}",
        name=task.task_id,
        title=task.title,
        annotations=types.Annotations(audience=["assistant"], priority=1),
    )


def handle_create_task(state: AppState, args: CreateTaskArgs) -> ToolResult:
    task = task_from_args(args)
    state.task_store.set(task.task_id, task)

    if state.single_agent:
        state.task_store.set_current_task(task.task_id)

    logger.info("Task created id=%s critical=%s", task.task_id, task.critical_path)

    res: dict[str, Any] = {
        "taskCreated": to_basic_task_info(
            task, include_status=False, include_deps=False, include_decompose_info=True
        ),
    }
    if state.single_agent:
        res["incompleteTasksIdealOrder"] = [
            t.task_id for t in state.task_store.incomplete_tasks_in_tree(task.task_id)
        ]

    content: list[types.ContentBlock] = []
    if must_decompose(task):
        content.append(assistant_text("Task must be decomposed before execution"))
    content.append(task_resource_link(task))

    return ToolResult(structured=res, content=content)
