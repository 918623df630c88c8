# SPDX-License-Identifier: MIT

import csv
import logging
from pathlib import Path
from typing import Any, Optional

import pendulum

from ganttgrid.model.task import Task
from ganttgrid.model.timeline import TimelineLayout
from ganttgrid.time import datetime_to_iso_str_optional, today_local

logger = logging.getLogger(__name__)

TASK_HEADERS = [
    "id",
    "title",
    "status",
    "priority",
    "due_date",
    "estimated_hours",
    "project",
    "tags",
]

TIMELINE_HEADERS = [
    "id",
    "title",
    "status",
    "priority",
    "due_date",
    "window_start",
    "window_end",
    "left_percent",
    "width_percent",
]


def default_export_path(name: str, today: Optional[pendulum.Date] = None) -> Path:
    """File name for an export, stamped with the date: tasks-2025-01-15.csv"""
    if today is None:
        today = today_local()
    return Path(f"{name}-{today.format('YYYY-MM-DD')}.csv")


def _write_csv(rows: list[dict[str, Any]], headers: list[str], path: Path) -> None:
    if len(rows) == 0:
        raise ValueError("No data to export")

    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=headers)
        writer.writeheader()
        writer.writerows(rows)
    logger.debug("exported %d rows to %s", len(rows), path)


def _task_row(task: Task) -> dict[str, Any]:
    return {
        "id": task["id"],
        "title": task["title"],
        "status": task["status"],
        "priority": task["priority"],
        "due_date": datetime_to_iso_str_optional(task["due_date"]),
        "estimated_hours": task["estimated_hours"],
        "project": task["project"],
        "tags": ",".join(task["tags"]) if task["tags"] else None,
    }


def export_tasks_csv(tasks: list[Task], path: Path) -> int:
    """Write tasks to a CSV file and return the number of rows written."""
    _write_csv([_task_row(task) for task in tasks], TASK_HEADERS, path)
    return len(tasks)


def export_timeline_csv(layout: TimelineLayout, path: Path) -> int:
    """Write each task's bar placement to a CSV file and return the row count."""
    window_start = layout["window"]["start"].to_date_string()
    window_end = layout["window"]["end"].to_date_string()

    rows = []
    for row in layout["rows"]:
        task = row["task"]
        rows.append(
            {
                "id": task["id"],
                "title": task["title"],
                "status": task["status"],
                "priority": task["priority"],
                "due_date": datetime_to_iso_str_optional(task["due_date"]),
                "window_start": window_start,
                "window_end": window_end,
                "left_percent": row["position"]["left_percent"],
                "width_percent": row["position"]["width_percent"],
            }
        )

    _write_csv(rows, TIMELINE_HEADERS, path)
    return len(rows)
