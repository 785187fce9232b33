# src/task_manager/resources.py

"""
task:// resources.

Every stored task can be read as JSON under task://<taskID>.
"""

from __future__ import annotations

import json
import logging

import mcp.types as types
from mcp.server.lowlevel.helper_types import ReadResourceContents

from .core.ports import TaskRepo

logger = logging.getLogger(__name__)

TASK_URI_SCHEME = "task://"
TASK_URI_TEMPLATE = "task://{taskID}"
TASK_MIME_TYPE = "application/json"


def task_uri(task_id: str) -> str:
    return f"{TASK_URI_SCHEME}{task_id}"


def parse_task_uri(uri: str) -> str:
    """Return the task id of a task:// URI. Raises ValueError for anything else."""
    uri = str(uri)
    if not uri.startswith(TASK_URI_SCHEME):
        raise ValueError(f"Invalid URI: {uri}")

    task_id = uri[len(TASK_URI_SCHEME):].rstrip("/")
    if not task_id:
        raise ValueError(f"Invalid URI: {uri}")
    return task_id


def list_task_resources(store: TaskRepo) -> list[types.Resource]:
    return [
        types.Resource(
            uri=task_uri(t.task_id),
            name=t.task_id,
            title=t.title,
            description=t.description,
            mimeType=TASK_MIME_TYPE,
            annotations=types.Annotations(audience=["assistant"]),
        )
        for t in store.list_tasks()
    ]


def task_resource_template() -> types.ResourceTemplate:
    return types.ResourceTemplate(
        uriTemplate=TASK_URI_TEMPLATE,
        name="task",
        title="Task",
        description="Full details of a task, as JSON",
        mimeType=TASK_MIME_TYPE,
    )


def read_task_resource(store: TaskRepo, uri: str) -> list[ReadResourceContents]:
    task_id = parse_task_uri(uri)

    task = store.get(task_id)
    if task is None:
        raise ValueError(f"Task not found: {task_id}")

    logger.debug("Resource read uri=%s", uri)
    return [
        ReadResourceContents(
            content=json.dumps(task.to_dict(), ensure_ascii=False),
            mime_type=TASK_MIME_TYPE,
        )
    ]
