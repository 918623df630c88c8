# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from ganttgrid.color import (
    TODAY_BACKGROUND,
    WEEKEND_BACKGROUND,
    get_priority_color,
    get_status_color,
)
from ganttgrid.model.day_cell import DayCell
from ganttgrid.model.task_position import TaskPosition
from ganttgrid.model.timeline import TimelineLayout, TimelineRow
from ganttgrid.view.header import header

# Days get a three character column ("15 ") when they fit, otherwise one
WIDE_SLOT_WIDTH = 3
NARROW_SLOT_WIDTH = 1


def gantt_view(
    layout: TimelineLayout,
    report_name: str = "timeline",
    left_column_width: int = 40,
    console: Optional[Console] = None,
) -> None:
    """
    Display tasks as bars on a day-by-day timeline.

    Each row shows the task's status dot and title on the left and a bar
    placed by the layout's left/width percentages on the right. Weekend
    columns are shaded and today's column is highlighted.

    Args:
        layout: The computed timeline layout
        report_name: The name shown under the header
        left_column_width: Width of the left column for task titles
        console: Console to print to (defaults to a new stdout console)
    """
    if console is None:
        console = Console()

    header(report_name, console=console)

    days = layout["days"]
    available_width = max(1, console.width - left_column_width)
    slot_width = _slot_width(len(days), available_width)
    grid_width = len(days) * slot_width

    window = layout["window"]
    date_range_str = (
        f"{window['start'].format('YYYY-MM-DD')} to "
        f"{window['end'].format('YYYY-MM-DD')}"
    )
    console.print(f"\n[bold]{date_range_str}[/bold] ({layout['total_days']} days)\n")

    chart_elements: list[Text] = [
        _build_month_row(days, slot_width, left_column_width),
        _build_day_row(days, slot_width, left_column_width),
        _build_separator(grid_width, left_column_width),
    ]

    for row in layout["rows"]:
        chart_elements.append(
            _build_task_row(row, days, slot_width, left_column_width)
        )

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))

    if len(layout["rows"]) == 0:
        console.print("[dim]No tasks with due dates to display[/dim]\n")


def _slot_width(total_days: int, available_width: int) -> int:
    if total_days * WIDE_SLOT_WIDTH <= available_width:
        return WIDE_SLOT_WIDTH
    return NARROW_SLOT_WIDTH


def bar_columns(position: TaskPosition, grid_width: int) -> tuple[int, int]:
    """
    Convert a task position into a [start, end) character span on the grid.

    Bars are at least one character wide and never run past the grid.
    A task pinned at 100% is drawn in the last column.
    """
    # Epsilon absorbs float error so a bar lands on its own day column
    start = math.floor(position["left_percent"] / 100 * grid_width + 1e-9)
    start = min(start, grid_width - 1)
    width = max(1, round(position["width_percent"] / 100 * grid_width))
    end = min(grid_width, start + width)
    return start, end


def _day_style(day: DayCell) -> str:
    if day["is_today"]:
        return f"on {TODAY_BACKGROUND}"
    if day["is_weekend"]:
        return f"on {WEEKEND_BACKGROUND}"
    return ""


def _new_row() -> Text:
    return Text(no_wrap=True, overflow="crop")


def _build_month_row(
    days: list[DayCell], slot_width: int, left_column_width: int
) -> Text:
    """Month abbreviations at the first column of each month in view."""
    row = _new_row()
    row.append(" " * left_column_width)

    labels = [" "] * (len(days) * slot_width)
    previous_month: Optional[tuple[int, int]] = None
    for i, day in enumerate(days):
        month = (day["date"].year, day["date"].month)
        if month != previous_month:
            label = day["date"].format("MMM")
            if day["date"].month == 1 or previous_month is None:
                label = day["date"].format("MMM YYYY")
            column = i * slot_width
            for offset, char in enumerate(label):
                if column + offset < len(labels):
                    labels[column + offset] = char
            previous_month = month

    row.append("".join(labels), style="bold sandy_brown")
    return row


def _build_day_row(days: list[DayCell], slot_width: int, left_column_width: int) -> Text:
    row = _new_row()
    row.append(" " * left_column_width)

    for day in days:
        if slot_width == WIDE_SLOT_WIDTH:
            label = day["date"].format("DD").ljust(slot_width)
        else:
            label = day["date"].format("D")[-1]

        style = _day_style(day)
        if day["is_today"]:
            style = f"bold {style}"
        elif day["is_weekend"]:
            style = f"dim {style}"
        row.append(label, style=style)

    return row


def _build_separator(grid_width: int, left_column_width: int) -> Text:
    return Text("─" * (left_column_width + grid_width), style="dim", no_wrap=True)


def _format_title(row: TimelineRow, left_column_width: int) -> Text:
    task = row["task"]
    title = task["title"]

    text = Text(no_wrap=True)
    text.append(" ● ", style=get_status_color(task["status"]))

    max_title_length = max(0, left_column_width - 4)
    if len(title) > max_title_length:
        title = title[: max(0, max_title_length - 1)] + "…"
    text.append(title.ljust(max_title_length))
    text.append(" ")
    return text


def _build_task_row(
    row: TimelineRow,
    days: list[DayCell],
    slot_width: int,
    left_column_width: int,
) -> Text:
    text = _new_row()
    text.append_text(_format_title(row, left_column_width))

    grid_width = len(days) * slot_width
    track = [" "] * grid_width
    styles = [_day_style(days[column // slot_width]) for column in range(grid_width)]

    position = row["position"]
    if position["width_percent"] > 0:
        task = row["task"]
        status_color = get_status_color(task["status"])
        start, end = bar_columns(position, grid_width)

        label = task["title"][: max(0, end - start - 1)]
        for offset, char in enumerate(label):
            track[start + 1 + offset] = char
        for column in range(start, end):
            styles[column] = f"white on {status_color}"
        track[start] = "▌"
        styles[start] = f"{get_priority_color(task['priority'])} on {status_color}"

    for char, style in zip(track, styles):
        text.append(char, style=style)

    return text
