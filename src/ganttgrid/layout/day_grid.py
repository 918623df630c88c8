# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttgrid.model.date_window import DateWindow
from ganttgrid.model.day_cell import DayCell
from ganttgrid.time import whole_days_between

WEEKEND_DAYS = {pendulum.SATURDAY, pendulum.SUNDAY}


def count_days(window: DateWindow) -> int:
    """
    Number of calendar days in the window, both ends included.

    Raises:
        ValueError: If the window ends before it starts
    """
    if window["end"] < window["start"]:
        raise ValueError(
            f"window ends before it starts: {window['start']} to {window['end']}"
        )
    return whole_days_between(window["start"], window["end"]) + 1


def generate_days(
    window: DateWindow, *, today: Optional[pendulum.Date] = None
) -> list[DayCell]:
    """
    Generate one cell per calendar day of the window, in order.

    Args:
        window: The window to cover
        today: The date flagged as today (defaults to the current date in the
            window's timezone)

    Returns:
        List of day cells with weekend and today flags set
    """
    start = window["start"]
    if today is None:
        today = pendulum.now(start.timezone).date()

    first_day = start.date()
    days: list[DayCell] = []
    for offset in range(count_days(window)):
        day = first_day.add(days=offset)
        days.append(
            {
                "date": day,
                "is_weekend": day.day_of_week in WEEKEND_DAYS,
                "is_today": day == today,
            }
        )
    return days
