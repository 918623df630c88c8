# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from ganttgrid.model.task import Task
from ganttgrid.repository.task import TASK_REPO
from ganttgrid.service.task import filter_tasks, sort_tasks_by_due_date
from ganttgrid.template.task import get_task_template
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.parse import parse_datetime, parse_hours
from ganttgrid.terminal.validate import (
    validate_priority,
    validate_status,
    validate_status_list,
)
from ganttgrid.view import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _get_task_or_exit(id: str) -> Task:
    try:
        return TASK_REPO.get_task(id)
    except ValueError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", help="valid input: project.subproject"),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-t", help="accepts multiple tag options"),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-st",
            callback=validate_status,
            help="todo, in_progress, review, completed or blocked",
        ),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_priority,
            help="low, medium, high or urgent",
        ),
    ] = None,
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due", "-u", parser=parse_datetime, help=DATE_HELP),
    ] = None,
    estimate: Annotated[
        Optional[float],
        typer.Option(
            "--estimate",
            "-e",
            parser=parse_hours,
            help="effort in hours: 6, 1.5 or 1:30",
        ),
    ] = None,
) -> None:
    """Add a task."""
    task = get_task_template()
    task["title"] = title
    task["description"] = description
    task["project"] = project
    task["tags"] = tags or None
    if status is not None:
        task["status"] = status  # type: ignore[typeddict-item]
    if priority is not None:
        task["priority"] = priority  # type: ignore[typeddict-item]
    task["due_date"] = due
    task["estimated_hours"] = estimate

    id = TASK_REPO.save_new_task(task)

    task_report.single_task_view(TASK_REPO.get_task(id))


@app.command("list, ls")
def list_tasks(
    status: Annotated[
        Optional[list[str]],
        typer.Option(
            "--status", "-st", callback=validate_status_list, help="repeatable"
        ),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", help="Filter tasks by project"),
    ] = None,
    tag: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-t", help="Filter tasks that have all of these tags"),
    ] = None,
    include_deleted: Annotated[
        bool,
        typer.Option("--include-deleted", "-i", help="Include deleted tasks"),
    ] = False,
) -> None:
    """List tasks ordered by due date."""
    tasks = filter_tasks(
        TASK_REPO.get_all_tasks(),
        statuses=status or None,
        project=project,
        tags=tag or None,
        include_deleted=include_deleted,
    )
    task_report.tasks_view(sort_tasks_by_due_date(tasks))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-ti")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    project: Annotated[Optional[str], typer.Option("--project", "-p")] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-t", help="replaces all tags, repeatable"),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-st", callback=validate_status),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option("--priority", "-pr", callback=validate_priority),
    ] = None,
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due", "-u", parser=parse_datetime, help=DATE_HELP),
    ] = None,
    estimate: Annotated[
        Optional[float],
        typer.Option("--estimate", "-e", parser=parse_hours),
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_project: Annotated[bool, typer.Option("--remove-project", "-rp")] = False,
    remove_tags: Annotated[bool, typer.Option("--remove-tags", "-rt")] = False,
    remove_due: Annotated[bool, typer.Option("--remove-due", "-ru")] = False,
    remove_estimate: Annotated[bool, typer.Option("--remove-estimate", "-re")] = False,
) -> None:
    """Change fields of a task. ID may be a unique prefix."""
    task = _get_task_or_exit(id)
    real_id = task["id"] or id

    TASK_REPO.modify_task(
        real_id,
        title=title,
        description=description,
        project=project,
        tags=tags or None,
        status=status,
        priority=priority,
        due_date=due,
        estimated_hours=estimate,
        remove_description=remove_description,
        remove_project=remove_project,
        remove_tags=remove_tags,
        remove_due_date=remove_due,
        remove_estimated_hours=remove_estimate,
    )

    task_report.single_task_view(TASK_REPO.get_task(real_id))


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """Mark a task as deleted. ID may be a unique prefix."""
    task = _get_task_or_exit(id)
    real_id = task["id"] or id

    TASK_REPO.delete_task(real_id)

    Console().print(f"[red]deleted[/red] {escape(task['title'])}")
