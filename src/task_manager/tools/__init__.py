"""
MCP tools.

Components:
- schemas.py: pydantic argument models (camelCase on the wire)
- registry.py: ToolRegistry / ToolResult (list + dispatch)
- create_task.py, decompose_task.py, update_task.py, task_info.py, current_task.py: handlers

`registry` below is the default registry the server uses.
"""

from __future__ import annotations

from . import create_task, current_task, decompose_task, task_info, update_task
from .registry import ToolRegistry, ToolResult
from .schemas import (
    CreateTaskArgs,
    CurrentTaskArgs,
    DecomposeTaskArgs,
    TaskInfoArgs,
    UpdateTaskArgs,
)


def build_registry() -> ToolRegistry:
    reg = ToolRegistry()
    reg.register(
        create_task.CREATE_TASK,
        create_task.handle_create_task,
        args_model=CreateTaskArgs,
        title=create_task.TITLE,
        description=create_task.DESCRIPTION,
    )
    reg.register(
        decompose_task.DECOMPOSE_TASK,
        decompose_task.handle_decompose_task,
        args_model=DecomposeTaskArgs,
        title=decompose_task.TITLE,
        description=decompose_task.DESCRIPTION,
    )
    reg.register(
        update_task.UPDATE_TASK,
        update_task.handle_update_task,
        args_model=UpdateTaskArgs,
        title=update_task.TITLE,
        description=update_task.DESCRIPTION,
    )
    reg.register(
        task_info.TASK_INFO,
        task_info.handle_task_info,
        args_model=TaskInfoArgs,
        title=task_info.TITLE,
        description=task_info.DESCRIPTION,
    )
    reg.register(
        current_task.CURRENT_TASK,
        current_task.handle_current_task,
        args_model=CurrentTaskArgs,
        title=current_task.TITLE,
        description=current_task.DESCRIPTION,
        single_agent_only=True,
    )
    return reg


registry = build_registry()

__all__ = ["ToolRegistry", "ToolResult", "build_registry", "registry"]
