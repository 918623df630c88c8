# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias

TaskStatusType: TypeAlias = Literal["todo", "in_progress", "review", "completed", "blocked"]
TaskPriorityType: TypeAlias = Literal["low", "medium", "high", "urgent"]


class TaskStatus:
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class TaskPriority:
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


TASK_STATUSES: list[str] = [
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.REVIEW,
    TaskStatus.COMPLETED,
    TaskStatus.BLOCKED,
]

TASK_PRIORITIES: list[str] = [
    TaskPriority.LOW,
    TaskPriority.MEDIUM,
    TaskPriority.HIGH,
    TaskPriority.URGENT,
]
