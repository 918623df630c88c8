# SPDX-License-Identifier: MIT

import pytest

from conftest import utc
from ganttgrid import configuration
from ganttgrid.repository.task import TaskRepository
from ganttgrid.template.task import get_task_template


def _new_task(title: str):
    task = get_task_template()
    task["title"] = title
    return task


def test_saved_tasks_survive_a_reload(app_paths):
    repository = TaskRepository()
    task = _new_task("Draft plan")
    task["due_date"] = utc(2025, 1, 15, 9)
    task["estimated_hours"] = 6.0
    task["tags"] = ["planning"]
    id = repository.save_new_task(task)

    assert repository.flush()
    assert (configuration.DATA_TASKS_DIR / f"{id}.yaml").is_file()

    reloaded = TaskRepository().get_task(id)
    assert reloaded["title"] == "Draft plan"
    assert reloaded["due_date"] == utc(2025, 1, 15, 9)
    assert reloaded["estimated_hours"] == 6.0
    assert reloaded["tags"] == ["planning"]
    assert reloaded["status"] == "todo"


def test_flush_without_changes_writes_nothing(app_paths):
    repository = TaskRepository()

    assert repository.get_all_tasks() == []
    assert not repository.flush()


def test_modify_task(app_paths):
    repository = TaskRepository()
    id = repository.save_new_task(_new_task("Review"))

    repository.modify_task(id, status="review", due_date=utc(2025, 2, 1))
    repository.modify_task(id, remove_due_date=True, estimated_hours=3)

    task = repository.get_task(id)
    assert task["status"] == "review"
    assert task["due_date"] is None
    assert task["estimated_hours"] == 3


def test_lookup_by_unique_prefix(app_paths):
    repository = TaskRepository()
    id = repository.save_new_task(_new_task("Prefix"))

    assert repository.get_task(id[:8])["id"] == id


def test_unknown_id_raises(app_paths):
    repository = TaskRepository()

    with pytest.raises(ValueError):
        repository.get_task("does-not-exist")


def test_delete_is_soft(app_paths):
    repository = TaskRepository()
    id = repository.save_new_task(_new_task("Old"))

    repository.delete_task(id)
    repository.flush()

    task = TaskRepository().get_task(id)
    assert task["deleted"] is not None


def test_returned_tasks_are_copies(app_paths):
    repository = TaskRepository()
    id = repository.save_new_task(_new_task("Original"))

    repository.get_task(id)["title"] = "Changed"

    assert repository.get_task(id)["title"] == "Original"
