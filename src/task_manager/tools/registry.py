# src/task_manager/tools/registry.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import mcp.types as types

from ..core.state import AppState
from .schemas import ArgsModel

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ToolResult:
    """
    What a tool handler returns.

    - structured: JSON-ready payload (becomes structuredContent)
    - content: extra content blocks for the caller (hints, resource links)
    """

    structured: dict[str, Any]
    content: list[types.ContentBlock] = field(default_factory=list)


ToolHandler = Callable[[AppState, Any], ToolResult]


@dataclass(slots=True, frozen=True)
class ToolDef:
    name: str
    title: str
    description: str
    args_model: type[ArgsModel]
    handler: ToolHandler
    single_agent_only: bool = False

    def to_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.args_model.input_schema(),
        )


def assistant_text(text: str) -> types.TextContent:
    return types.TextContent(
        type="text",
        text=text,
        annotations=types.Annotations(audience=["assistant"]),
    )


class ToolRegistry:
    """Name -> tool registry used by the server (list + dispatch)."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDef] = {}

    def register(
        self,
        name: str,
        handler: ToolHandler,
        *,
        args_model: type[ArgsModel],
        title: str,
        description: str,
        single_agent_only: bool = False,
    ) -> None:
        self._tools[name] = ToolDef(
            name=name,
            title=title,
            description=description,
            args_model=args_model,
            handler=handler,
            single_agent_only=single_agent_only,
        )

    def _available(self, single_agent: bool) -> list[ToolDef]:
        return [t for t in self._tools.values() if single_agent or not t.single_agent_only]

    def names(self, *, single_agent: bool) -> list[str]:
        return [t.name for t in self._available(single_agent)]

    def list_tools(self, *, single_agent: bool) -> list[types.Tool]:
        return [t.to_tool() for t in self._available(single_agent)]

    def handle(self, state: AppState, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """
        Validate arguments and run the named tool against state.

        Raises ValueError for unknown tools and pydantic.ValidationError for bad arguments.
        """
        tool = self._tools.get(name)
        if tool is None or (tool.single_agent_only and not state.single_agent):
            raise ValueError(f"Unknown tool: {name}")

        args = tool.args_model.model_validate(arguments or {})
        logger.debug("Tool call name=%s", name)
        return tool.handler(state, args)
