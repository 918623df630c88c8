# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Callable, Optional

import pendulum
import pytest

from ganttgrid import configuration
from ganttgrid.initialize import initialize
from ganttgrid.model.task import Task
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.repository.task import TASK_REPO
from ganttgrid.view import state as view_state


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, hour, minute, tz="UTC")


@pytest.fixture
def make_task() -> Callable[..., Task]:
    counter = {"n": 0}

    def factory(
        due_date: Optional[pendulum.DateTime] = None,
        estimated_hours: Optional[float] = None,
        **fields: Any,
    ) -> Task:
        counter["n"] += 1
        created = utc(2025, 1, 1)
        task: Task = {
            "id": f"task-{counter['n']}",
            "title": f"Task {counter['n']}",
            "description": None,
            "project": None,
            "tags": None,
            "status": "todo",
            "priority": "medium",
            "due_date": due_date,
            "estimated_hours": estimated_hours,
            "created": created,
            "updated": created,
            "deleted": None,
        }
        task.update(fields)  # type: ignore[typeddict-item]
        return task

    return factory


@pytest.fixture
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data at a temporary directory and reset cached state."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_TASKS_DIR", data_dir / "tasks")

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_tasks", None)
    monkeypatch.setattr(TASK_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_dirty_ids", set())

    initialize()
    view_state.set_show_header(True)
    return tmp_path


@pytest.fixture(autouse=True)
def show_header() -> None:
    # Header visibility lives in a context variable that outlives a single test
    view_state.set_show_header(True)
