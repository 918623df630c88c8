# SPDX-License-Identifier: MIT

import uuid
from typing import Optional, TypeAlias, TypedDict

import pendulum

from ganttgrid.model.task_status import TaskPriorityType, TaskStatusType

TaskId: TypeAlias = str


def generate_task_id() -> TaskId:
    return str(uuid.uuid4())


class Task(TypedDict):
    id: Optional[TaskId]
    title: str
    description: Optional[str]
    project: Optional[str]
    tags: Optional[list[str]]
    status: TaskStatusType
    priority: TaskPriorityType
    due_date: Optional[pendulum.DateTime]
    estimated_hours: Optional[float]
    created: pendulum.DateTime
    updated: pendulum.DateTime
    deleted: Optional[pendulum.DateTime]
