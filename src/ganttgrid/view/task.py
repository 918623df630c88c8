# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ganttgrid.color import get_priority_color, get_status_color
from ganttgrid.model.task import Task
from ganttgrid.time import datetime_to_display_local_date_str_optional
from ganttgrid.view.header import header


def _format_hours(hours: Optional[float]) -> str:
    if hours is None:
        return ""
    if hours == int(hours):
        return f"{int(hours)}h"
    return f"{hours:g}h"


def tasks_view(
    tasks: list[Task],
    report_name: str = "tasks",
    console: Optional[Console] = None,
) -> None:
    """Display tasks in a table, one row per task."""
    if console is None:
        console = Console()

    header(report_name, console=console)

    if len(tasks) == 0:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("id", style="dim")
    table.add_column("title")
    table.add_column("status")
    table.add_column("priority")
    table.add_column("due")
    table.add_column("estimate", justify="right")
    table.add_column("project", style="cyan")
    table.add_column("tags", style="magenta")

    for task in tasks:
        status = task["status"]
        priority = task["priority"]
        table.add_row(
            (task["id"] or "")[:8],
            escape(task["title"])
            if task["deleted"] is None
            else f"[strike]{escape(task['title'])}[/strike]",
            f"[{get_status_color(status)}]{status}[/{get_status_color(status)}]",
            f"[{get_priority_color(priority)}]{priority}[/{get_priority_color(priority)}]",
            datetime_to_display_local_date_str_optional(task["due_date"]) or "",
            _format_hours(task["estimated_hours"]),
            task["project"] or "",
            ", ".join(task["tags"]) if task["tags"] else "",
        )

    console.print(table)


def single_task_view(task: Task, console: Optional[Console] = None) -> None:
    """Display every field of one task."""
    if console is None:
        console = Console()

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")

    table.add_row("id", task["id"] or "")
    table.add_row("title", escape(task["title"]))
    table.add_row("description", escape(task["description"] or ""))
    table.add_row("status", task["status"])
    table.add_row("priority", task["priority"])
    table.add_row(
        "due", datetime_to_display_local_date_str_optional(task["due_date"]) or ""
    )
    table.add_row("estimate", _format_hours(task["estimated_hours"]))
    table.add_row("project", task["project"] or "")
    table.add_row("tags", ", ".join(task["tags"]) if task["tags"] else "")

    console.print(table)
