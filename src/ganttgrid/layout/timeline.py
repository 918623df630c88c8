# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttgrid.layout.day_grid import count_days, generate_days
from ganttgrid.layout.position import (
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_MIN_WIDTH_PERCENT,
    task_position,
)
from ganttgrid.layout.window import (
    DEFAULT_FALLBACK_DAYS,
    DEFAULT_PADDING_DAYS,
    resolve_window,
)
from ganttgrid.model.task import Task
from ganttgrid.model.timeline import TimelineLayout
from ganttgrid.time import today_local


def _in_tz(value: Optional[pendulum.DateTime], tz: str) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    return value.in_tz(tz)


def build_timeline(
    tasks: list[Task],
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
    *,
    today: Optional[pendulum.Date] = None,
    tz: str = "local",
    padding_days: int = DEFAULT_PADDING_DAYS,
    fallback_days: int = DEFAULT_FALLBACK_DAYS,
    hours_per_day: float = DEFAULT_HOURS_PER_DAY,
    min_width_percent: float = DEFAULT_MIN_WIDTH_PERCENT,
) -> TimelineLayout:
    """
    Lay out tasks on a day grid.

    All date-times are moved into `tz` first so day boundaries, weekends and
    today are judged on the viewer's calendar. Rows keep the input order.
    """
    local_tasks: list[Task] = []
    for task in tasks:
        local_task = task.copy()
        local_task["due_date"] = _in_tz(task["due_date"], tz)
        local_tasks.append(local_task)

    if today is None:
        today = today_local(tz)

    window = resolve_window(
        local_tasks,
        _in_tz(start, tz),
        _in_tz(end, tz),
        today=today,
        tz=tz,
        padding_days=padding_days,
        fallback_days=fallback_days,
    )
    total_days = count_days(window)

    return {
        "window": window,
        "total_days": total_days,
        "days": generate_days(window, today=today),
        "rows": [
            {
                "task": task,
                "position": task_position(
                    task,
                    window,
                    total_days,
                    hours_per_day=hours_per_day,
                    min_width_percent=min_width_percent,
                ),
            }
            for task in local_tasks
        ],
    }
