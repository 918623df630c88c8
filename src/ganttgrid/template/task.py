# SPDX-License-Identifier: MIT

from ganttgrid.model.task import Task
from ganttgrid.model.task_status import TaskPriority, TaskStatus
from ganttgrid.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "title": "",
        "description": None,
        "project": None,
        "tags": None,
        "status": TaskStatus.TODO,
        "priority": TaskPriority.MEDIUM,
        "due_date": None,
        "estimated_hours": None,
        "created": now,
        "updated": now,
        "deleted": None,
    }
