# SPDX-License-Identifier: MIT

import datetime
import json
import logging
import math
from pathlib import Path
from typing import Any, Optional

import pendulum
from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from ganttgrid.model.task import Task, generate_task_id
from ganttgrid.model.task_status import (
    TASK_PRIORITIES,
    TASK_STATUSES,
    TaskPriority,
    TaskStatus,
)
from ganttgrid.time import now_utc

logger = logging.getLogger(__name__)

# Records exported from the task service use camelCase column names
_KEY_ALIASES = {
    "dueDate": "due_date",
    "due": "due_date",
    "estimatedHours": "estimated_hours",
    "estimate": "estimated_hours",
    "name": "title",
    "createdAt": "created",
    "created_at": "created",
    "updatedAt": "updated",
    "updated_at": "updated",
    "deletedAt": "deleted",
    "deleted_at": "deleted",
}


def _parse_datetime(value: Any, field: str, task_id: str) -> Optional[pendulum.DateTime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day)
    try:
        parsed = pendulum.parse(str(value))
    except ValueError:
        logger.warning("task %s: ignoring unparseable %s %r", task_id, field, value)
        return None
    if not isinstance(parsed, pendulum.DateTime):
        logger.warning("task %s: ignoring %s %r, not a date", task_id, field, value)
        return None
    return parsed


def _parse_hours(value: Any, task_id: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        hours = float(value)
    except (TypeError, ValueError):
        logger.warning("task %s: ignoring non-numeric estimate %r", task_id, value)
        return None
    if not math.isfinite(hours):
        logger.warning("task %s: ignoring non-finite estimate %r", task_id, value)
        return None
    if hours <= 0:
        return None
    return hours


def _parse_tags(value: Any) -> Optional[list[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        tags = [tag.strip() for tag in value.split(",")]
    else:
        tags = [str(tag).strip() for tag in value]
    tags = [tag for tag in tags if tag]
    return tags or None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def normalize_task(raw: dict[str, Any]) -> Task:
    """
    Convert a task record from an external task service into a Task.

    Keys may be camelCase or snake_case. Missing or malformed due dates and
    estimates become None, unknown statuses become "todo" and unknown
    priorities become "medium"; none of these raise.

    Raises:
        ValueError: If the record has no title
    """
    record = {_KEY_ALIASES.get(key, key): value for key, value in raw.items()}

    task_id = _optional_str(record.get("id")) or generate_task_id()

    title = _optional_str(record.get("title"))
    if title is None:
        raise ValueError(f"task {task_id}: title is required")

    status = str(record.get("status") or TaskStatus.TODO).strip().lower()
    if status not in TASK_STATUSES:
        logger.warning("task %s: unknown status %r, using todo", task_id, status)
        status = TaskStatus.TODO

    priority = str(record.get("priority") or TaskPriority.MEDIUM).strip().lower()
    if priority not in TASK_PRIORITIES:
        logger.warning("task %s: unknown priority %r, using medium", task_id, priority)
        priority = TaskPriority.MEDIUM

    now = now_utc()
    created = _parse_datetime(record.get("created"), "created", task_id) or now
    updated = _parse_datetime(record.get("updated"), "updated", task_id) or created

    return {
        "id": task_id,
        "title": title,
        "description": _optional_str(record.get("description")),
        "project": _optional_str(record.get("project")),
        "tags": _parse_tags(record.get("tags")),
        "status": status,  # type: ignore[typeddict-item]
        "priority": priority,  # type: ignore[typeddict-item]
        "due_date": _parse_datetime(record.get("due_date"), "due date", task_id),
        "estimated_hours": _parse_hours(record.get("estimated_hours"), task_id),
        "created": created,
        "updated": updated,
        "deleted": _parse_datetime(record.get("deleted"), "deleted", task_id),
    }


def load_tasks_file(path: Path) -> list[Task]:
    """
    Read tasks exported from a task service.

    The file is JSON (.json) or YAML (.yaml, .yml) holding either a list of
    task records or a mapping with a "tasks" list.
    """
    text = path.read_text()
    if path.suffix == ".json":
        document = json.loads(text)
    elif path.suffix in (".yaml", ".yml"):
        document = load(text, Loader=Loader)
    else:
        raise ValueError(f"Unsupported task file type: {path.suffix or path.name}")

    if isinstance(document, dict):
        document = document.get("tasks")
    if document is None:
        return []
    if not isinstance(document, list):
        raise ValueError(f"{path.name}: expected a list of tasks")

    tasks = [normalize_task(record) for record in document]
    logger.debug("read %d tasks from %s", len(tasks), path)
    return tasks
