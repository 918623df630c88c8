# SPDX-License-Identifier: MIT

import pendulum
from rich.console import Console

from conftest import utc
from ganttgrid.layout.timeline import build_timeline
from ganttgrid.view.gantt import bar_columns, gantt_view


def _render(layout, width: int = 140, left_column_width: int = 30) -> str:
    console = Console(record=True, width=width, color_system=None)
    gantt_view(layout, left_column_width=left_column_width, console=console)
    return console.export_text()


def test_bar_columns_scale_percentages():
    assert bar_columns({"left_percent": 50.0, "width_percent": 10.0}, 40) == (20, 24)


def test_bar_columns_land_on_the_due_day():
    # Day 14 of 30 in three character slots starts at column 42
    position = {"left_percent": 14 / 30 * 100, "width_percent": 2 / 30 * 100}

    assert bar_columns(position, 90) == (42, 48)


def test_bar_columns_pinned_right_stay_on_grid():
    assert bar_columns({"left_percent": 100.0, "width_percent": 2.0}, 30) == (29, 30)


def test_bar_columns_are_at_least_one_wide():
    assert bar_columns({"left_percent": 0.0, "width_percent": 2.0}, 10) == (0, 1)


def test_render_shows_range_and_tasks(make_task):
    layout = build_timeline(
        [
            make_task(title="Kickoff", due_date=utc(2025, 1, 15), estimated_hours=16),
            make_task(title="Someday"),
        ],
        utc(2025, 1, 1),
        utc(2025, 1, 30),
        today=pendulum.date(2025, 1, 15),
        tz="UTC",
    )

    output = _render(layout)

    assert "ganttgrid" in output
    assert "2025-01-01 to 2025-01-30 (30 days)" in output
    assert "Jan 2025" in output
    assert "Kickoff" in output
    assert "Someday" in output
    assert "No tasks with due dates to display" not in output


def test_render_places_bar_after_title_column(make_task):
    layout = build_timeline(
        [make_task(title="Kickoff", due_date=utc(2025, 1, 15), estimated_hours=16)],
        utc(2025, 1, 1),
        utc(2025, 1, 30),
        today=pendulum.date(2025, 1, 1),
        tz="UTC",
    )

    lines = _render(layout).splitlines()
    row = next(line for line in lines if line.startswith(" ● Kickoff"))

    # 30 columns of title, then 14 days of three columns before the bar
    assert row[30 + 42] == "▌"


def test_render_long_titles_are_truncated(make_task):
    title = "A very long task title that will not fit in the column"
    layout = build_timeline(
        [make_task(title=title, due_date=utc(2025, 1, 15))],
        today=pendulum.date(2025, 1, 1),
        tz="UTC",
    )

    output = _render(layout, left_column_width=20)

    assert "A very long tas…" in output


def test_render_empty_layout(make_task):
    layout = build_timeline([], today=pendulum.date(2025, 1, 1), tz="UTC")

    output = _render(layout, width=80)

    assert "No tasks with due dates to display" in output


def test_render_narrow_console_uses_single_character_days(make_task):
    layout = build_timeline(
        [make_task(title="Kickoff", due_date=utc(2025, 1, 15))],
        utc(2025, 1, 1),
        utc(2025, 3, 31),
        today=pendulum.date(2025, 1, 1),
        tz="UTC",
    )

    lines = _render(layout, width=140, left_column_width=40).splitlines()

    assert all(len(line) <= 140 for line in lines)
    assert any("Feb" in line for line in lines)
