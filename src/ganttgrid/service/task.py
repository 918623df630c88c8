# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

import pendulum

from ganttgrid.model.task import Task
from ganttgrid.repository.task import TASK_REPO
from ganttgrid.service.normalize import load_tasks_file


def filter_tasks(
    tasks: list[Task],
    statuses: Optional[list[str]] = None,
    project: Optional[str] = None,
    tags: Optional[list[str]] = None,
    include_deleted: bool = False,
) -> list[Task]:
    """
    Narrow a task list, keeping the input order.

    Projects match on the project itself or any sub-project ("work" matches
    "work.site"). Tasks must carry every tag given.
    """
    filtered = tasks
    if not include_deleted:
        filtered = [task for task in filtered if task["deleted"] is None]
    if statuses is not None:
        filtered = [task for task in filtered if task["status"] in statuses]
    if project is not None:
        filtered = [
            task
            for task in filtered
            if task["project"] is not None
            and (task["project"] == project or task["project"].startswith(f"{project}."))
        ]
    if tags is not None:
        filtered = [
            task
            for task in filtered
            if task["tags"] is not None and all(tag in task["tags"] for tag in tags)
        ]
    return filtered


def sort_tasks_by_due_date(tasks: list[Task]) -> list[Task]:
    """Order tasks by due date, undated tasks last."""
    return sorted(
        tasks,
        key=lambda task: (
            task["due_date"] is None,
            task["due_date"] or pendulum.DateTime.min,
        ),
    )


def load_source_tasks(file: Optional[Path] = None) -> list[Task]:
    """Tasks from an exported task file when given, otherwise from the local store."""
    if file is not None:
        return load_tasks_file(file)
    return TASK_REPO.get_all_tasks()
