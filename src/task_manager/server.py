# src/task_manager/server.py

"""
MCP server wiring.

Binds the tool registry and the task:// resources to an `mcp` low-level
Server. The server owns nothing itself: the TaskStore lives on AppState,
which is built once and injected here.

Example:
    state = create_initial_state()
    server = create_server(state)
    await run_stdio(server)
"""

from __future__ import annotations

import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from . import __version__
from .core.state import AppState
from .resources import list_task_resources, read_task_resource, task_resource_template
from .tools import ToolRegistry
from .tools import registry as default_registry

logger = logging.getLogger(__name__)


def build_instructions(single_agent: bool) -> str:
    current_task_line = (
        "\n- current_task: Get task infos for in-progress tasks." if single_agent else ""
    )
    return f"""Use this server to manage structured tasks.

Tools:
- create_task: Create a new task.
- decompose_task: Decompose a complex task into smaller, more manageable subtasks.
All tasks with complexity higher than low must always be decomposed before execution.
- update_task: Change the status of a task.
Must use 'update_task' before executing a task, and when executing a task has finished.
- task_info: Get full details for specified task IDs.{current_task_line}

Resources:
Tasks can be accessed as resources using the task:// URI scheme:
- Read individual task: task://taskID"""


def create_server(state: AppState, *, tool_registry: ToolRegistry | None = None) -> Server:
    reg = tool_registry or default_registry
    name = str(getattr(state.settings, "app_name", "task-manager"))

    server: Server = Server(
        name,
        version=__version__,
        instructions=build_instructions(state.single_agent),
    )

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return reg.list_tools(single_agent=state.single_agent)

    # Arguments are validated by the pydantic models inside the registry.
    @server.call_tool(validate_input=False)
    async def call_tool(
        name: str, arguments: dict[str, Any]
    ) -> tuple[list[types.ContentBlock], dict[str, Any]]:
        try:
            result = reg.handle(state, name, arguments)
        except Exception as e:
            logger.warning("Tool %s failed: %s", name, e)
            raise
        return result.content, result.structured

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return list_task_resources(state.task_store)

    @server.list_resource_templates()
    async def list_resource_templates() -> list[types.ResourceTemplate]:
        return [task_resource_template()]

    @server.read_resource()
    async def read_resource(uri: AnyUrl):
        return read_task_resource(state.task_store, str(uri))

    logger.info(
        "Server %s ready (tools=%s)",
        name,
        ", ".join(reg.names(single_agent=state.single_agent)),
    )
    return server


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
