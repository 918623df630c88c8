# SPDX-License-Identifier: MIT

from typing import TypedDict

from ganttgrid.model.date_window import DateWindow
from ganttgrid.model.day_cell import DayCell
from ganttgrid.model.task import Task
from ganttgrid.model.task_position import TaskPosition


class TimelineRow(TypedDict):
    task: Task
    position: TaskPosition


class TimelineLayout(TypedDict):
    window: DateWindow
    total_days: int
    days: list[DayCell]
    rows: list[TimelineRow]
