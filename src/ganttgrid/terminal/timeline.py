# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from ganttgrid.layout.timeline import build_timeline
from ganttgrid.model.timeline import TimelineLayout
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.service.task import filter_tasks, load_source_tasks
from ganttgrid.terminal.parse import parse_datetime
from ganttgrid.terminal.validate import validate_status_list
from ganttgrid.view.gantt import gantt_view

DATE_HELP = "YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"

FileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Read tasks from a JSON or YAML export instead of the local store",
    ),
]
StartOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--start",
        "-s",
        parser=parse_datetime,
        help=f"First day of the timeline, used with --end ({DATE_HELP})",
    ),
]
EndOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--end",
        "-e",
        parser=parse_datetime,
        help=f"Last day of the timeline, used with --start ({DATE_HELP})",
    ),
]
StatusOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--status", "-st", callback=validate_status_list, help="Filter by status, repeatable"
    ),
]
ProjectOption = Annotated[
    Optional[str], typer.Option("--project", "-p", help="Filter tasks by project")
]
TagOption = Annotated[
    Optional[list[str]],
    typer.Option("--tag", "-t", help="Filter tasks that have all of these tags"),
]


def compute_timeline(
    file: Optional[Path],
    start: Optional[pendulum.DateTime],
    end: Optional[pendulum.DateTime],
    status: Optional[list[str]],
    project: Optional[str],
    tag: Optional[list[str]],
) -> TimelineLayout:
    """Load, filter and lay out tasks using the configured layout settings."""
    if (start is None) != (end is None):
        Console(stderr=True).print(
            "[yellow]--start and --end are only used together, "
            "resolving the window from task due dates[/yellow]"
        )

    try:
        tasks = load_source_tasks(file)
    except ValueError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    tasks = filter_tasks(
        tasks,
        statuses=status or None,
        project=project,
        tags=tag or None,
    )

    config = CONFIGURATION_REPO.get_config()
    try:
        return build_timeline(
            tasks,
            start,
            end,
            padding_days=config["padding_days"],
            fallback_days=config["fallback_days"],
            hours_per_day=config["hours_per_day"],
            min_width_percent=config["min_width_percent"],
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))


def timeline(
    start: StartOption = None,
    end: EndOption = None,
    file: FileOption = None,
    status: StatusOption = None,
    project: ProjectOption = None,
    tag: TagOption = None,
    left_width: Annotated[
        Optional[int],
        typer.Option("--left-width", "-lw", help="Width of left column for task titles"),
    ] = None,
) -> None:
    """Display tasks on a gantt chart timeline."""
    layout = compute_timeline(file, start, end, status, project, tag)

    if left_width is None:
        left_width = CONFIGURATION_REPO.get_config()["left_column_width"]

    gantt_view(layout, left_column_width=left_width)
