# src/task_manager/tools/decompose_task.py

from __future__ import annotations

import logging
from typing import Any

import mcp.types as types

from ..core.state import AppState
from ..tasks.task_models import Task, TaskStatus, must_decompose, to_basic_task_info
from .create_task import task_from_args
from .registry import ToolResult, assistant_text
from .schemas import DecomposeTaskArgs

logger = logging.getLogger(__name__)

DECOMPOSE_TASK = "decompose_task"
TITLE = "Decompose task"
DESCRIPTION = """Decomposes an existing complex task into smaller, more manageable subtasks.
All tasks with complexity higher than low must always be decomposed before execution.
Tasks can only be decomposed while in todo status.
Subtasks with the same sequence order may be executed in parallel.
Subtasks should include a verification subtask.
Created subtasks may be decomposed later if needed."""


def handle_decompose_task(state: AppState, args: DecomposeTaskArgs) -> ToolResult:
    """
    Create the subtasks and wire their dependencies:
    - subtasks of a sequence order depend on every subtask of the previous order
    - the parent task depends on every subtask of the highest order
    """
    parent = state.task_store.get(args.task_id)
    if parent is None:
        raise ValueError(f"Task not found: {args.task_id}")

    if parent.status != TaskStatus.TODO:
        raise ValueError(f"Can't decompose task {args.task_id} in status: {parent.status.value}")

    by_order: dict[int, list[Task]] = {}
    for subtask in args.subtasks:
        by_order.setdefault(subtask.sequence_order, []).append(task_from_args(subtask))

    orders = sorted(by_order)
    for prev_order, order in zip(orders, orders[1:]):
        prev_ids = [t.task_id for t in by_order[prev_order]]
        for task in by_order[order]:
            task.depends_on_task_ids = list(prev_ids)

    created = [task for order in orders for task in by_order[order]]
    for task in created:
        state.task_store.set(task.task_id, task)

    last_ids = [t.task_id for t in by_order[orders[-1]]]
    parent.depends_on_task_ids = parent.depends_on_task_ids + [
        tid for tid in last_ids if tid not in parent.depends_on_task_ids
    ]

    logger.info(
        "Task decomposed id=%s subtasks=%d orders=%d reason=%r",
        parent.task_id,
        len(created),
        len(orders),
        args.decomposition_reason,
    )

    res: dict[str, Any] = {
        "taskUpdated": to_basic_task_info(
            parent, include_status=False, include_deps=False, include_decompose_info=False
        ),
        "tasksCreated": [
            to_basic_task_info(t, include_status=False, include_deps=False, include_decompose_info=True)
            for t in created
        ],
    }
    if state.single_agent:
        res["incompleteTasksIdealOrder"] = [
            t.task_id for t in state.task_store.incomplete_tasks_in_tree(parent.task_id)
        ]

    content: list[types.ContentBlock] = []
    if any(must_decompose(t) for t in created):
        content.append(assistant_text("Some tasks must be decomposed before execution"))

    return ToolResult(structured=res, content=content)
