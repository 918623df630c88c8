# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttgrid import configuration, time
from ganttgrid.model.task import Task, TaskId, generate_task_id

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is not None:
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug(
            "loaded %d tasks from %s", len(self._tasks), configuration.DATA_TASKS_DIR
        )

    def __save_data(self) -> None:
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(
                    deepcopy(task)
                )
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))
        logger.debug("wrote %d tasks", len(self._dirty_ids))
        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["due_date"] = time.datetime_to_iso_str_optional(
            serializable_task["due_date"]
        )
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        serializable_task["updated"] = time.datetime_to_iso_str(
            serializable_task["updated"]
        )
        serializable_task["deleted"] = time.datetime_to_iso_str_optional(
            serializable_task["deleted"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["due_date"] = time.datetime_from_str_optional(
            deserializable_task.get("due_date")
        )
        deserializable_task["created"] = time.datetime_from_str(
            deserializable_task["created"]
        )
        deserializable_task["updated"] = time.datetime_from_str(
            deserializable_task["updated"]
        )
        deserializable_task["deleted"] = time.datetime_from_str_optional(
            deserializable_task.get("deleted")
        )
        return cast(Task, deserializable_task)

    def save_new_task(self, task: Task) -> TaskId:
        self.is_dirty = True

        id = generate_task_id()
        task["id"] = id
        self.tasks.append(task)
        self._dirty_ids.add(id)
        return id

    def modify_task(
        self,
        id: TaskId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        project: Optional[str] = None,
        tags: Optional[list[str]] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        due_date: Optional[pendulum.DateTime] = None,
        estimated_hours: Optional[float] = None,
        deleted: Optional[pendulum.DateTime] = None,
        remove_description: bool = False,
        remove_project: bool = False,
        remove_tags: bool = False,
        remove_due_date: bool = False,
        remove_estimated_hours: bool = False,
    ) -> None:
        task = self.__get_task_reference(id)

        if title is not None:
            task["title"] = title
        if description is not None:
            task["description"] = description
        if project is not None:
            task["project"] = project
        if tags is not None:
            task["tags"] = tags
        if status is not None:
            task["status"] = status  # type: ignore[typeddict-item]
        if priority is not None:
            task["priority"] = priority  # type: ignore[typeddict-item]
        if due_date is not None:
            task["due_date"] = due_date
        if estimated_hours is not None:
            task["estimated_hours"] = estimated_hours
        if deleted is not None:
            task["deleted"] = deleted
        if remove_description:
            task["description"] = None
        if remove_project:
            task["project"] = None
        if remove_tags:
            task["tags"] = None
        if remove_due_date:
            task["due_date"] = None
        if remove_estimated_hours:
            task["estimated_hours"] = None

        task["updated"] = time.now_utc()
        self.is_dirty = True
        self._dirty_ids.add(cast(str, task["id"]))

    def delete_task(self, id: TaskId) -> None:
        self.modify_task(id, deleted=time.now_utc())

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: TaskId) -> Task:
        return deepcopy(self.__get_task_reference(id))

    def __get_task_reference(self, id: TaskId) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return task
        # Accept a unique id prefix, the list view only shows the first 8 characters
        matches = [task for task in self.tasks if (task["id"] or "").startswith(id)]
        if len(matches) == 1:
            return matches[0]
        raise ValueError(f"No task with id '{id}'")


TASK_REPO = TaskRepository()
