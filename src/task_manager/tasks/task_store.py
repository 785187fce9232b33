# src/task_manager/tasks/task_store.py

from __future__ import annotations

import logging
import threading

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Holds every Task record (by reference: callers mutate the returned object
    in place) plus a single "current task" pointer used in single-agent mode.
    Nothing is persisted; the store lives as long as the process.

    Thread-safety:
    - a re-entrant lock guards the map and the current-task pointer
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._current_task_id: str | None = None
        self._lock = threading.RLock()
        logger.debug("TaskStore ready")

    # ---- records ----

    def set(self, task_id: str, task: Task) -> None:
        with self._lock:
            self._tasks[task_id] = task
        logger.debug("Task stored id=%s status=%s", task_id, task.status.value)

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            return self._tasks.get(task_id)

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---- current task (single-agent mode) ----

    def set_current_task(self, task_id: str) -> None:
        with self._lock:
            self._current_task_id = task_id
        logger.debug("Current task -> %s", task_id)

    def get_current_task(self) -> str | None:
        with self._lock:
            return self._current_task_id

    # ---- graph queries ----

    def get_all_in_tree(self, task_id: str) -> list[Task]:
        """
        Return every task connected to task_id through dependency edges,
        followed in both directions, including the task itself.

        Fixed-point expansion: each pass walks a snapshot of the ids found so
        far, adding forward dependencies and every task that depends on them.
        Stops after a pass that adds nothing. Result is in first-added order.

        Ids without a record (dangling dependencies, unknown start id) are
        left out of the returned list and are not expanded, so two tasks
        sharing a missing dependency stay in separate trees.
        """
        with self._lock:
            result_ids: list[str] = [task_id]
            included = {task_id}

            def include(other_id: str) -> bool:
                if other_id in included:
                    return False
                included.add(other_id)
                result_ids.append(other_id)
                return True

            while True:
                added_more = False

                for current_id in list(result_ids):
                    task = self._tasks.get(current_id)
                    if task is None:
                        # Dangling id: no edges of its own, never a bridge.
                        continue

                    for dep_id in task.depends_on_task_ids:
                        added_more = include(dep_id) or added_more

                    for other in self._tasks.values():
                        if current_id in other.depends_on_task_ids:
                            added_more = include(other.task_id) or added_more

                if not added_more:
                    break

            return [self._tasks[i] for i in result_ids if i in self._tasks]

    def incomplete_tasks_in_tree(self, task_id: str) -> list[Task]:
        """
        Unfinished tasks of task_id's tree in an order that respects their
        dependencies, preferring critical-path tasks whenever several are ready.

        Kahn's algorithm restricted to incomplete tasks: edges to done/failed
        tasks or to unknown ids impose no constraint. The ready queue is
        re-sorted (stable, critical first) before every pop, so FIFO order
        holds among tasks of equal criticality.

        Tasks caught in a dependency cycle never become ready and are
        silently left out.
        """
        with self._lock:
            incomplete = [t for t in self.get_all_in_tree(task_id) if not t.status.is_finished]

            task_map = {t.task_id: t for t in incomplete}
            in_degree: dict[str, int] = {}

            for task in incomplete:
                deps = {dep_id for dep_id in task.depends_on_task_ids if dep_id in task_map}
                in_degree[task.task_id] = len(deps)

            queue = [tid for tid, degree in in_degree.items() if degree == 0]
            result: list[Task] = []

            while queue:
                queue.sort(key=lambda tid: not task_map[tid].critical_path)

                first_id = queue.pop(0)
                result.append(task_map[first_id])

                for task in incomplete:
                    if first_id not in task.depends_on_task_ids:
                        continue

                    in_degree[task.task_id] -= 1
                    if in_degree[task.task_id] == 0:
                        queue.append(task.task_id)

            if len(result) < len(incomplete):
                logger.debug(
                    "Unresolvable dependencies in tree of %s: %d task(s) left out",
                    task_id,
                    len(incomplete) - len(result),
                )

            return result
