# SPDX-License-Identifier: MIT

import math

from ganttgrid.model.date_window import DateWindow
from ganttgrid.model.task import Task
from ganttgrid.model.task_position import TaskPosition
from ganttgrid.time import whole_days_between

DEFAULT_HOURS_PER_DAY = 8.0
DEFAULT_MIN_WIDTH_PERCENT = 2.0


def _clamp(value: float, lowest: float, highest: float) -> float:
    return max(lowest, min(highest, value))


def task_duration_days(
    task: Task, hours_per_day: float = DEFAULT_HOURS_PER_DAY
) -> int:
    """Whole workdays a task spans. A missing or zero estimate counts as one day."""
    if hours_per_day <= 0:
        raise ValueError(
            f"hours_per_day must be greater than zero, got {hours_per_day}"
        )
    estimated_hours = task["estimated_hours"] or hours_per_day
    return max(1, math.ceil(estimated_hours / hours_per_day))


def task_position(
    task: Task,
    window: DateWindow,
    total_days: int,
    *,
    hours_per_day: float = DEFAULT_HOURS_PER_DAY,
    min_width_percent: float = DEFAULT_MIN_WIDTH_PERCENT,
) -> TaskPosition:
    """
    Place a task's bar on the timeline as percentages of the grid width.

    The bar starts at the task's due date and spans its estimated duration.
    Tasks falling outside the window are pinned to the nearest edge rather
    than rejected. Percentages are not rounded.

    Args:
        task: The task to place
        window: The resolved timeline window
        total_days: Number of day columns in the grid
        hours_per_day: Hours of effort that make up one day of bar width
        min_width_percent: Smallest bar width, keeps short tasks visible

    Returns:
        Left offset and width; both 0 when the task has no due date

    Raises:
        ValueError: If total_days is less than 1
    """
    if total_days < 1:
        raise ValueError(f"total_days must be at least 1, got {total_days}")

    due_date = task["due_date"]
    if due_date is None:
        return {"left_percent": 0.0, "width_percent": 0.0}

    days_from_start = whole_days_between(window["start"], due_date)
    left_percent = days_from_start / total_days * 100

    duration = task_duration_days(task, hours_per_day)
    width_percent = duration / total_days * 100

    return {
        "left_percent": _clamp(left_percent, 0.0, 100.0),
        "width_percent": _clamp(width_percent, min_width_percent, 100.0),
    }
