# SPDX-License-Identifier: MIT

from ganttgrid.model.task_status import TaskPriority, TaskStatus

DEFAULT_STATUS_COLOR = "grey50"
DEFAULT_PRIORITY_COLOR = "grey70"

STATUS_COLORS = {
    TaskStatus.COMPLETED: "green",
    TaskStatus.IN_PROGRESS: "blue",
    TaskStatus.REVIEW: "yellow",
    TaskStatus.BLOCKED: "red",
}

PRIORITY_COLORS = {
    TaskPriority.URGENT: "red3",
    TaskPriority.HIGH: "dark_orange",
    TaskPriority.MEDIUM: "yellow",
}

# Day grid column backgrounds
WEEKEND_BACKGROUND = "grey15"
TODAY_BACKGROUND = "dark_blue"


def get_status_color(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)


def get_priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, DEFAULT_PRIORITY_COLOR)
