# src/task_manager/tasks/task_models.py

from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

TASK_ID_LENGTH = 10
TASK_ID_ALPHABET = string.ascii_letters + string.digits + "_-"
_TASK_ID_EDGES = re.compile(r"^[a-zA-Z0-9].*[a-zA-Z0-9]$")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Allowed transitions:
    - forward: todo -> in-progress -> done | failed (skipping ahead is fine)
    - backward: done -> in-progress only (rework)
    - done <-> failed is never allowed
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_finished(self) -> bool:
        return self in (TaskStatus.DONE, TaskStatus.FAILED)

    def can_transition_to(self, new_status: TaskStatus) -> bool:
        if new_status == self:
            return True
        if self == TaskStatus.DONE and new_status == TaskStatus.IN_PROGRESS:
            return True
        if self.is_finished:
            return False
        return _STATUS_RANK[new_status] > _STATUS_RANK[self]


_STATUS_RANK = {
    TaskStatus.TODO: 0,
    TaskStatus.IN_PROGRESS: 1,
    TaskStatus.DONE: 2,
    TaskStatus.FAILED: 2,
}


class ComplexityLevel(StrEnum):
    TRIVIAL = "trivial"
    LOW = "low, may benefit from decomposition before execution"
    AVERAGE = "average, must decompose before execution"
    MEDIUM = "medium, must decompose before execution"
    HIGH = "high, must decompose before execution"


@dataclass(slots=True)
class TaskComplexity:
    level: ComplexityLevel
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level.value, "description": self.description}


@dataclass(slots=True)
class UncertaintyArea:
    title: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "description": self.description}


@dataclass(slots=True)
class Task:
    task_id: str
    status: TaskStatus

    title: str
    description: str
    goal: str

    depends_on_task_ids: list[str] = field(default_factory=list)
    definitions_of_done: list[str] = field(default_factory=list)
    critical_path: bool = False
    uncertainty_areas: list[UncertaintyArea] = field(default_factory=list)
    estimated_complexity: TaskComplexity | None = None
    lessons_learned: list[str] = field(default_factory=list)
    verification_evidence: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Wire form (camelCase keys). estimatedComplexity is omitted when unset."""
        out: dict[str, Any] = {
            "taskID": self.task_id,
            "status": self.status.value,
            "dependsOnTaskIDs": list(self.depends_on_task_ids),
            "title": self.title,
            "description": self.description,
            "goal": self.goal,
            "definitionsOfDone": list(self.definitions_of_done),
            "criticalPath": self.critical_path,
            "uncertaintyAreas": [a.to_dict() for a in self.uncertainty_areas],
        }
        if self.estimated_complexity is not None:
            out["estimatedComplexity"] = self.estimated_complexity.to_dict()
        out["lessonsLearned"] = list(self.lessons_learned)
        out["verificationEvidence"] = list(self.verification_evidence)
        return out


def new_task_id() -> str:
    # Ids must start and end with an alphanumeric character.
    while True:
        task_id = "".join(secrets.choice(TASK_ID_ALPHABET) for _ in range(TASK_ID_LENGTH))
        if _TASK_ID_EDGES.match(task_id):
            return task_id


def must_decompose(task: Task) -> bool:
    complexity = task.estimated_complexity
    if complexity is None:
        return False
    return complexity.level not in (ComplexityLevel.TRIVIAL, ComplexityLevel.LOW)


def to_basic_task_info(
    task: Task,
    *,
    include_status: bool,
    include_deps: bool,
    include_decompose_info: bool,
) -> dict[str, Any]:
    """
    Compact task summary used in tool responses.

    Optional keys are left out entirely instead of being sent as null.
    """
    info: dict[str, Any] = {"taskID": task.task_id}
    if include_status:
        info["status"] = task.status.value
    info["title"] = task.title
    if include_deps:
        info["dependsOnTaskIDs"] = list(task.depends_on_task_ids)
    if include_decompose_info and must_decompose(task):
        info["mustDecomposeBeforeExecution"] = True
    return info
