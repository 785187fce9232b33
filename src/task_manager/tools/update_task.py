# src/task_manager/tools/update_task.py

from __future__ import annotations

import logging
from typing import Any

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_models import Task, TaskStatus, to_basic_task_info
from .registry import ToolResult
from .schemas import TaskAdditions, TaskChanges, TaskRemovals, TaskUpdateArgs, UpdateTaskArgs

logger = logging.getLogger(__name__)

UPDATE_TASK = "update_task"
TITLE = "Update tasks"
DESCRIPTION = """Updates the status and/or other properties of one or more tasks.
Must use this tool before executing tasks, and when finished executing tasks.
Should always include lessons learned to inform future tasks.
Important: Always update multiple tasks in a single call if dependencies allow it."""


def handle_update_task(state: AppState, args: UpdateTaskArgs) -> ToolResult:
    """
    Apply updates in order. An invalid entry raises and stops the call;
    entries before it stay applied.
    """
    updated = [update_single_task(state.task_store, update) for update in args.tasks]

    res: dict[str, Any] = {
        "tasksUpdated": [
            to_basic_task_info(
                t,
                include_status=False,
                include_deps=not t.status.is_finished,
                include_decompose_info=t.status == TaskStatus.TODO,
            )
            for t in updated
        ],
    }
    if state.single_agent:
        first_id = args.tasks[0].task_id
        res["incompleteTasksIdealOrder"] = [
            t.task_id for t in state.task_store.incomplete_tasks_in_tree(first_id)
        ]

    return ToolResult(structured=res)


def update_single_task(store: TaskRepo, update: TaskUpdateArgs) -> Task:
    task = store.get(update.task_id)
    if task is None:
        raise ValueError(f"Task not found: {update.task_id}")

    if update.changes is not None:
        _apply_changes(store, task, update.changes)

    if update.additions is not None:
        _apply_additions(task, update.additions)

    if update.removals is not None:
        _apply_removals(task, update.removals)

    logger.info("Task updated id=%s status=%s", task.task_id, task.status.value)
    return task


def _critical_path_deps_not_done(store: TaskRepo, task: Task) -> list[str]:
    pending: list[str] = []
    for dep_id in task.depends_on_task_ids:
        dep = store.get(dep_id)
        if dep is None:
            logger.debug("Task %s depends on unknown task %s; ignored", task.task_id, dep_id)
            continue
        if dep.critical_path and dep.status != TaskStatus.DONE:
            pending.append(dep_id)
    return pending


def _validate_transition(store: TaskRepo, task: Task, new_status: TaskStatus) -> None:
    old_status = task.status

    if not old_status.can_transition_to(new_status):
        raise ValueError(
            f"Can't transition task {task.task_id} from {old_status.value} to {new_status.value}"
        )

    if new_status == TaskStatus.DONE:
        pending = _critical_path_deps_not_done(store, task)
        if pending:
            raise ValueError(
                f"Can't transition task {task.task_id} to {new_status.value}: "
                f"Critical path dependencies are not {TaskStatus.DONE.value}: {', '.join(pending)}"
            )


def _apply_changes(store: TaskRepo, task: Task, changes: TaskChanges) -> None:
    if changes.status is not None:
        _validate_transition(store, task, changes.status)
        task.status = changes.status

    if changes.title:
        task.title = changes.title

    if changes.description:
        task.description = changes.description

    if changes.goal:
        task.goal = changes.goal

    if changes.critical_path is not None:
        task.critical_path = changes.critical_path

    if changes.estimated_complexity is not None:
        task.estimated_complexity = changes.estimated_complexity.to_model()


def _apply_additions(task: Task, additions: TaskAdditions) -> None:
    if additions.depends_on_task_ids:
        for dep_id in additions.depends_on_task_ids:
            if dep_id == task.task_id:
                raise ValueError(f"Task {task.task_id} can't depend on itself")
            if dep_id not in task.depends_on_task_ids:
                task.depends_on_task_ids.append(dep_id)

    if additions.definitions_of_done:
        task.definitions_of_done.extend(additions.definitions_of_done)

    if additions.uncertainty_areas:
        task.uncertainty_areas.extend(a.to_model() for a in additions.uncertainty_areas)

    if additions.lessons_learned:
        task.lessons_learned.extend(additions.lessons_learned)

    if additions.verification_evidence:
        task.verification_evidence.extend(additions.verification_evidence)


def _apply_removals(task: Task, removals: TaskRemovals) -> None:
    if removals.depends_on_task_ids:
        remove = set(removals.depends_on_task_ids)
        task.depends_on_task_ids = [d for d in task.depends_on_task_ids if d not in remove]
