# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from ganttgrid.model.date_window import DateWindow
from ganttgrid.model.task import Task
from ganttgrid.time import today_local

logger = logging.getLogger(__name__)

DEFAULT_PADDING_DAYS = 7
DEFAULT_FALLBACK_DAYS = 30


def resolve_window(
    tasks: list[Task],
    explicit_start: Optional[pendulum.DateTime] = None,
    explicit_end: Optional[pendulum.DateTime] = None,
    *,
    today: Optional[pendulum.Date] = None,
    tz: str = "local",
    padding_days: int = DEFAULT_PADDING_DAYS,
    fallback_days: int = DEFAULT_FALLBACK_DAYS,
) -> DateWindow:
    """
    Resolve the inclusive calendar-day window a timeline is laid out in.

    Explicit bounds win when both are given and are used as-is apart from
    being widened to whole days. Otherwise the window spans the earliest to
    the latest task due date, padded on both sides so boundary tasks are not
    flush against the grid edge. With no dated tasks at all the window covers
    `fallback_days` days starting today.

    Args:
        tasks: Tasks to derive the window from
        explicit_start: Optional first day of the window
        explicit_end: Optional last day of the window
        today: The current date (defaults to today in `tz`)
        tz: Timezone used for the fallback window
        padding_days: Days added before the earliest and after the latest due date
        fallback_days: Length of the window when no task has a due date

    Returns:
        The resolved window, aligned to start-of-day and end-of-day

    Raises:
        ValueError: If explicit_end falls on a day before explicit_start
    """
    if explicit_start is not None and explicit_end is not None:
        start = explicit_start.start_of("day")
        end = explicit_end.end_of("day")
        if end < start:
            raise ValueError("end must be on/after start.")
        logger.debug("using explicit window %s to %s", start, end)
        return {"start": start, "end": end}

    due_dates = [task["due_date"] for task in tasks if task["due_date"] is not None]

    if len(due_dates) == 0:
        if today is None:
            today = today_local(tz)
        start = pendulum.datetime(today.year, today.month, today.day, tz=tz)
        end = start.add(days=fallback_days - 1).end_of("day")
        logger.debug("no due dates, falling back to %d days from %s", fallback_days, today)
        return {"start": start, "end": end}

    earliest = min(due_dates)
    latest = max(due_dates)

    return {
        "start": earliest.subtract(days=padding_days).start_of("day"),
        "end": latest.add(days=padding_days).end_of("day"),
    }
