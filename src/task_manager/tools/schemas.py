# src/task_manager/tools/schemas.py

"""
Tool argument models.

Field names are snake_case in Python and camelCase on the wire
(taskID, dependsOnTaskIDs, definitionsOfDone, ...). The JSON schema of each
model, by alias, is what the server publishes as the tool's inputSchema.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..tasks.task_models import (
    ComplexityLevel,
    TaskComplexity,
    TaskStatus,
    UncertaintyArea,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]
TaskID = Annotated[str, Field(min_length=1)]
TaskIDList = Annotated[list[TaskID], Field(min_length=1)]
NonEmptyStrList = Annotated[list[NonEmptyStr], Field(min_length=1)]


class ArgsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        return cls.model_json_schema(by_alias=True)


class UncertaintyAreaArgs(ArgsModel):
    title: NonEmptyStr = Field(description="A concise title for this uncertainty area")
    description: NonEmptyStr = Field(description="A description of this uncertainty area")

    def to_model(self) -> UncertaintyArea:
        return UncertaintyArea(title=self.title, description=self.description)


class TaskComplexityArgs(ArgsModel):
    """
    An estimate of the complexity of this task.
    All tasks with complexity higher than low must be decomposed into smaller,
    more manageable subtasks before execution.
    Caution: Don't underestimate complexity.
    """

    level: ComplexityLevel = Field(description="The level of complexity for this task")
    description: NonEmptyStr = Field(description="A description of the complexity of this task")

    def to_model(self) -> TaskComplexity:
        return TaskComplexity(level=self.level, description=self.description)


TITLE_DESCRIPTION = "A concise title for this task. Must be understandable out of context"
DESCRIPTION_DESCRIPTION = "A detailed description of this task. Must be understandable out of context"
GOAL_DESCRIPTION = "The overall goal of this task. Must be understandable out of context"
CRITICAL_PATH_DESCRIPTION = "Whether this task is on the critical path and required for completion"
DEFINITIONS_OF_DONE_DESCRIPTION = (
    "A detailed list of criteria that must be met for this task to be considered 'complete'. "
    "Must be understandable out of context."
)
UNCERTAINTY_AREAS_DESCRIPTION = (
    "A detailed list of areas where there is uncertainty about this task's requirements or execution. "
    "Must be understandable out of context. May be empty."
)


class SimpleTaskArgs(ArgsModel):
    title: NonEmptyStr = Field(description=TITLE_DESCRIPTION)
    description: NonEmptyStr = Field(description=DESCRIPTION_DESCRIPTION)
    goal: NonEmptyStr = Field(description=GOAL_DESCRIPTION)
    critical_path: bool = Field(description=CRITICAL_PATH_DESCRIPTION)
    definitions_of_done: list[NonEmptyStr] = Field(description=DEFINITIONS_OF_DONE_DESCRIPTION)
    uncertainty_areas: list[UncertaintyAreaArgs] = Field(description=UNCERTAINTY_AREAS_DESCRIPTION)


class CreateTaskArgs(SimpleTaskArgs):
    estimated_complexity: TaskComplexityArgs


class SubtaskArgs(CreateTaskArgs):
    sequence_order: int = Field(
        ge=1,
        description=(
            "The sequence order of this subtask. "
            "Subtasks may use the same sequence order if they can be executed in parallel."
        ),
    )


class DecomposeTaskArgs(ArgsModel):
    task_id: TaskID = Field(alias="taskID", description="The task to decompose")
    decomposition_reason: NonEmptyStr = Field(description="The reason for decomposing this task")
    subtasks: list[SubtaskArgs] = Field(
        min_length=1, description="Array of smaller, manageable subtasks to create"
    )


class TaskChanges(ArgsModel):
    status: Optional[TaskStatus] = Field(default=None, description="The new status of this task")
    title: Optional[NonEmptyStr] = Field(default=None, description=TITLE_DESCRIPTION)
    description: Optional[NonEmptyStr] = Field(default=None, description=DESCRIPTION_DESCRIPTION)
    goal: Optional[NonEmptyStr] = Field(default=None, description=GOAL_DESCRIPTION)
    critical_path: Optional[bool] = Field(default=None, description=CRITICAL_PATH_DESCRIPTION)
    estimated_complexity: Optional[TaskComplexityArgs] = None


class TaskAdditions(ArgsModel):
    depends_on_task_ids: Optional[TaskIDList] = Field(
        default=None,
        alias="dependsOnTaskIDs",
        description="New tasks that this task depends on",
    )
    definitions_of_done: Optional[list[NonEmptyStr]] = Field(
        default=None, description=DEFINITIONS_OF_DONE_DESCRIPTION
    )
    uncertainty_areas: Optional[list[UncertaintyAreaArgs]] = Field(
        default=None, description=UNCERTAINTY_AREAS_DESCRIPTION
    )
    lessons_learned: Optional[NonEmptyStrList] = Field(
        default=None,
        description="Lessons learned while executing this task that may inform future tasks",
    )
    verification_evidence: Optional[NonEmptyStrList] = Field(
        default=None,
        description=(
            "Verification evidence that this task was executed as planned, "
            "and that the definitions of done were met"
        ),
    )


class TaskRemovals(ArgsModel):
    depends_on_task_ids: Optional[TaskIDList] = Field(
        default=None,
        alias="dependsOnTaskIDs",
        description="Tasks that this task no longer depends on",
    )


class TaskUpdateArgs(ArgsModel):
    task_id: TaskID = Field(alias="taskID", description="The identifier of the task to change status")
    changes: Optional[TaskChanges] = Field(
        default=None, alias="set", description="Optional properties to update on this task"
    )
    additions: Optional[TaskAdditions] = Field(
        default=None, alias="add", description="Optional properties to add to this task"
    )
    removals: Optional[TaskRemovals] = Field(
        default=None, alias="remove", description="Optional properties to remove from this task"
    )


class UpdateTaskArgs(ArgsModel):
    tasks: list[TaskUpdateArgs] = Field(min_length=1, description="The tasks to update")


class TaskInfoArgs(ArgsModel):
    task_ids: list[TaskID] = Field(
        alias="taskIDs",
        min_length=1,
        description="A list of task IDs to retrieve information for",
    )


class CurrentTaskArgs(ArgsModel):
    pass
