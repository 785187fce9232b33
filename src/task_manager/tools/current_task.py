# src/task_manager/tools/current_task.py

from __future__ import annotations

from ..core.state import AppState
from ..tasks.task_models import TaskStatus, to_basic_task_info
from .registry import ToolResult, assistant_text
from .schemas import CurrentTaskArgs

CURRENT_TASK = "current_task"
TITLE = "Get current task"
DESCRIPTION = "Returns a list of tasks that are currently in progress."


def handle_current_task(state: AppState, args: CurrentTaskArgs) -> ToolResult:
    """Summaries of every task in the current task's tree (single-agent mode)."""
    current_id = state.task_store.get_current_task()
    if not current_id:
        return ToolResult(structured={"tasks": []})

    tasks = state.task_store.get_all_in_tree(current_id)

    res = {
        "tasks": [
            to_basic_task_info(
                t,
                include_status=True,
                include_deps=not t.status.is_finished,
                include_decompose_info=t.status == TaskStatus.TODO,
            )
            for t in tasks
        ],
    }

    return ToolResult(
        structured=res,
        content=[assistant_text("Use 'task_info' to retrieve full task details")],
    )
