# SPDX-License-Identifier: MIT

import csv
from pathlib import Path

import pendulum
import pytest

from conftest import utc
from ganttgrid.layout.timeline import build_timeline
from ganttgrid.service.export import (
    default_export_path,
    export_tasks_csv,
    export_timeline_csv,
)


def _read_rows(path: Path) -> list[dict[str, str]]:
    with path.open(newline="") as f:
        return list(csv.DictReader(f))


def test_export_tasks_quotes_awkward_values(tmp_path, make_task):
    path = tmp_path / "tasks.csv"
    tasks = [
        make_task(
            title='Plan "Q1", then review',
            due_date=utc(2025, 1, 15),
            estimated_hours=6.0,
            tags=["a", "b"],
        ),
        make_task(title="Line\nbreak"),
    ]

    assert export_tasks_csv(tasks, path) == 2

    rows = _read_rows(path)
    assert rows[0]["title"] == 'Plan "Q1", then review'
    assert rows[0]["due_date"] == "2025-01-15T00:00:00+00:00"
    assert rows[0]["estimated_hours"] == "6.0"
    assert rows[0]["tags"] == "a,b"
    assert rows[1]["title"] == "Line\nbreak"
    assert rows[1]["due_date"] == ""


def test_export_timeline(tmp_path, make_task):
    path = tmp_path / "timeline.csv"
    layout = build_timeline(
        [make_task(due_date=utc(2025, 1, 15), estimated_hours=16), make_task()],
        utc(2025, 1, 1),
        utc(2025, 1, 30),
        today=pendulum.date(2025, 1, 1),
        tz="UTC",
    )

    assert export_timeline_csv(layout, path) == 2

    rows = _read_rows(path)
    assert rows[0]["window_start"] == "2025-01-01"
    assert rows[0]["window_end"] == "2025-01-30"
    assert float(rows[0]["left_percent"]) == pytest.approx(14 / 30 * 100)
    assert float(rows[0]["width_percent"]) == pytest.approx(2 / 30 * 100)
    assert float(rows[1]["width_percent"]) == 0.0


def test_export_nothing_raises(tmp_path):
    path = tmp_path / "tasks.csv"

    with pytest.raises(ValueError, match="No data to export"):
        export_tasks_csv([], path)
    assert not path.exists()


def test_default_export_path_is_dated():
    assert default_export_path("tasks", pendulum.date(2025, 1, 15)) == Path(
        "tasks-2025-01-15.csv"
    )
