# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ganttgrid.service.export import (
    default_export_path,
    export_tasks_csv,
    export_timeline_csv,
)
from ganttgrid.service.task import filter_tasks, load_source_tasks
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.timeline import (
    EndOption,
    FileOption,
    ProjectOption,
    StartOption,
    StatusOption,
    TagOption,
    compute_timeline,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

OutputOption = Annotated[
    Optional[Path],
    typer.Option(
        "--output",
        "-o",
        dir_okay=False,
        help="CSV file to write (defaults to <name>-YYYY-MM-DD.csv)",
    ),
]


@app.command("tasks, ta")
def tasks(
    output: OutputOption = None,
    file: FileOption = None,
    status: StatusOption = None,
    project: ProjectOption = None,
    tag: TagOption = None,
) -> None:
    """Export tasks to CSV."""
    console = Console()
    path = output if output is not None else default_export_path("tasks")

    try:
        selected = filter_tasks(
            load_source_tasks(file),
            statuses=status or None,
            project=project,
            tags=tag or None,
        )
        count = export_tasks_csv(selected, path)
    except ValueError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Exported {count} tasks to {path}[/green]")


@app.command("timeline, tl")
def timeline(
    output: OutputOption = None,
    start: StartOption = None,
    end: EndOption = None,
    file: FileOption = None,
    status: StatusOption = None,
    project: ProjectOption = None,
    tag: TagOption = None,
) -> None:
    """Export each task's timeline placement to CSV."""
    console = Console()
    path = output if output is not None else default_export_path("timeline")

    layout = compute_timeline(file, start, end, status, project, tag)
    try:
        count = export_timeline_csv(layout, path)
    except ValueError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Exported {count} tasks to {path}[/green]")
