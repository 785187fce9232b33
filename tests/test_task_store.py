# tests/test_task_store.py

from __future__ import annotations

import pytest

from task_manager.tasks.task_models import TaskStatus
from task_manager.tasks.task_store import TaskStore


def _ids(tasks) -> list[str]:
    return [t.task_id for t in tasks]


# ---- records / current task ----


def test_set_get_returns_same_instance(store: TaskStore, make_task) -> None:
    task = make_task("A")

    got = store.get("A")
    assert got is task

    got.status = TaskStatus.IN_PROGRESS
    assert store.get("A").status == TaskStatus.IN_PROGRESS


def test_get_unknown_returns_none(store: TaskStore) -> None:
    assert store.get("missing") is None


def test_set_overwrites(store: TaskStore, make_task) -> None:
    make_task("A")
    replacement = make_task("A", critical=True)

    assert store.get("A") is replacement
    assert store.count_tasks() == 1


def test_current_task_pointer(store: TaskStore) -> None:
    assert store.get_current_task() is None

    store.set_current_task("not-even-stored")
    assert store.get_current_task() == "not-even-stored"


def test_list_tasks_in_insertion_order(store: TaskStore, make_task) -> None:
    make_task("B")
    make_task("A")
    assert _ids(store.list_tasks()) == ["B", "A"]


# ---- get_all_in_tree ----


def test_tree_includes_task_without_dependencies(store: TaskStore, make_task) -> None:
    make_task("A")
    make_task("Other")

    assert _ids(store.get_all_in_tree("A")) == ["A"]


def test_tree_follows_both_directions(store: TaskStore, make_task) -> None:
    # C <- B <- A, and D depends on B; E is unrelated
    make_task("A", deps=["B"])
    make_task("B", deps=["C"])
    make_task("C")
    make_task("D", deps=["B"])
    make_task("E")

    tree = _ids(store.get_all_in_tree("C"))
    assert set(tree) == {"A", "B", "C", "D"}
    assert tree[0] == "C"


def test_tree_first_added_order(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B"])
    make_task("B", deps=["C"])
    make_task("C")

    assert _ids(store.get_all_in_tree("A")) == ["A", "B", "C"]


def test_tree_is_symmetric_within_component(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "C"])
    make_task("B", deps=["D"])
    make_task("C", deps=["D"])
    make_task("D")
    make_task("X", deps=["Y"])
    make_task("Y")

    expected = {"A", "B", "C", "D"}
    for start in expected:
        assert set(_ids(store.get_all_in_tree(start))) == expected

    assert set(_ids(store.get_all_in_tree("Y"))) == {"X", "Y"}


def test_tree_terminates_on_cycle(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B"])
    make_task("B", deps=["A"])

    tree = _ids(store.get_all_in_tree("A"))
    assert sorted(tree) == ["A", "B"]


def test_tree_skips_dangling_dependencies(store: TaskStore, make_task) -> None:
    make_task("A", deps=["ghost", "B"])
    make_task("B")

    assert _ids(store.get_all_in_tree("A")) == ["A", "B"]


def test_shared_missing_dependency_does_not_join_trees(store: TaskStore, make_task) -> None:
    make_task("A", deps=["ghost"])
    make_task("X", deps=["ghost"])

    assert _ids(store.get_all_in_tree("A")) == ["A"]
    assert _ids(store.get_all_in_tree("X")) == ["X"]
    assert _ids(store.incomplete_tasks_in_tree("A")) == ["A"]


def test_tree_of_unknown_task_is_empty(store: TaskStore, make_task) -> None:
    make_task("B", deps=["missing"])
    make_task("A")
    assert store.get_all_in_tree("missing") == []


# ---- incomplete_tasks_in_tree ----


def test_linear_chain(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B"])
    make_task("B", deps=["C"])
    make_task("C")

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["C", "B", "A"]


def test_done_and_failed_dependencies_are_excluded(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "C"])
    make_task("B", status=TaskStatus.DONE)
    make_task("C", status=TaskStatus.FAILED)

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["A"]


def test_priority_fan_in(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "C", "D", "E"])
    make_task("B", critical=True)
    make_task("C", critical=True)
    make_task("D")
    make_task("E")

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["B", "C", "D", "E", "A"]


def test_critical_ready_task_goes_first(store: TaskStore, make_task) -> None:
    make_task("A", deps=["N", "K"])
    make_task("N")
    make_task("K", critical=True)

    order = _ids(store.incomplete_tasks_in_tree("A"))
    assert order.index("K") < order.index("N")


def test_diamond(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "C"])
    make_task("B", deps=["D"], critical=True)
    make_task("C", deps=["D"])
    make_task("D")

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["D", "B", "C", "A"]


def test_diamond_with_critical_on_other_branch(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "C"])
    make_task("B", deps=["D"])
    make_task("C", deps=["D"], critical=True)
    make_task("D")

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["D", "C", "B", "A"]


def test_newly_ready_critical_task_jumps_the_queue(store: TaskStore, make_task) -> None:
    # After R1 is popped, X becomes ready and is critical: it must go before R2/R3.
    make_task("Root", deps=["R1", "R2", "R3", "X"])
    make_task("R1")
    make_task("R2")
    make_task("R3")
    make_task("X", deps=["R1"], critical=True)

    assert _ids(store.incomplete_tasks_in_tree("Root")) == ["R1", "X", "R2", "R3", "Root"]


def test_finished_tasks_never_in_order(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B"])
    make_task("B", deps=["C"], status=TaskStatus.DONE)
    make_task("C", status=TaskStatus.FAILED)
    make_task("D", deps=["C"], status=TaskStatus.IN_PROGRESS)

    order = _ids(store.incomplete_tasks_in_tree("A"))
    assert set(order) == {"A", "D"}


def test_order_respects_dependencies(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "C"], critical=True)
    make_task("B", deps=["E"])
    make_task("C", deps=["D", "E"], critical=True)
    make_task("D", deps=["F"])
    make_task("E", critical=True)
    make_task("F")
    make_task("G", deps=["A"])

    order = _ids(store.incomplete_tasks_in_tree("F"))
    assert set(order) == {"A", "B", "C", "D", "E", "F", "G"}

    position = {tid: i for i, tid in enumerate(order)}
    for tid in order:
        for dep_id in store.get(tid).depends_on_task_ids:
            if dep_id in position:
                assert position[dep_id] < position[tid], (dep_id, tid)


def test_dangling_dependency_does_not_block(store: TaskStore, make_task) -> None:
    make_task("A", deps=["ghost"])

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["A"]


def test_cycle_among_incomplete_tasks_is_dropped(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B"])
    make_task("B", deps=["A"])
    make_task("C", deps=["A"])
    make_task("D")
    make_task("E", deps=["D"])

    assert store.incomplete_tasks_in_tree("C") == []
    assert _ids(store.incomplete_tasks_in_tree("E")) == ["D", "E"]


def test_duplicate_dependency_is_counted_once(store: TaskStore, make_task) -> None:
    make_task("A", deps=["B", "B"])
    make_task("B")

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["B", "A"]


@pytest.mark.parametrize("status", [TaskStatus.DONE, TaskStatus.FAILED])
def test_finished_start_task_is_not_returned(store: TaskStore, make_task, status) -> None:
    make_task("A", status=status)
    make_task("B", deps=["A"])

    assert _ids(store.incomplete_tasks_in_tree("A")) == ["B"]
