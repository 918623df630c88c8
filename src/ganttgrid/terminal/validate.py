# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from ganttgrid.model.task_status import TASK_PRIORITIES, TASK_STATUSES

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_status(status: Optional[str]) -> Optional[str]:
    if status is None:
        return None
    if status not in TASK_STATUSES:
        raise typer.BadParameter(f"Status must be one of: {', '.join(TASK_STATUSES)}")
    return status


def validate_status_list(statuses: Optional[list[str]]) -> Optional[list[str]]:
    if statuses is None:
        return None
    for status in statuses:
        validate_status(status)
    return statuses


def validate_priority(priority: Optional[str]) -> Optional[str]:
    if priority is None:
        return None
    if priority not in TASK_PRIORITIES:
        raise typer.BadParameter(
            f"Priority must be one of: {', '.join(TASK_PRIORITIES)}"
        )
    return priority


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    if level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
    return level.upper()


def validate_positive_int(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 1:
        raise typer.BadParameter("Value must be at least 1")
    return value
