# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ganttgrid import configuration
from ganttgrid.repository.configuration import (
    CONFIGURATION_REPO,
)
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.validate import validate_log_level, validate_positive_int

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("hours_per_day", str(config["hours_per_day"]))
    table.add_row("padding_days", str(config["padding_days"]))
    table.add_row("fallback_days", str(config["fallback_days"]))
    table.add_row("min_width_percent", str(config["min_width_percent"]))
    table.add_row("log_level", config.get("log_level", "WARNING"))

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show the report header"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the task store"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the default data directory"),
    ] = False,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            callback=validate_positive_int,
            help="Width of the task title column",
        ),
    ] = None,
    hours_per_day: Annotated[
        Optional[float],
        typer.Option("--hours-per-day", help="Estimated hours that fill one day"),
    ] = None,
    padding_days: Annotated[
        Optional[int],
        typer.Option("--padding-days", help="Days shown before and after due dates"),
    ] = None,
    fallback_days: Annotated[
        Optional[int],
        typer.Option(
            "--fallback-days",
            callback=validate_positive_int,
            help="Days shown when no task has a due date",
        ),
    ] = None,
    min_width_percent: Annotated[
        Optional[float],
        typer.Option("--min-width-percent", help="Smallest bar width in percent"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
) -> None:
    """Update configuration settings."""
    if hours_per_day is not None and hours_per_day <= 0:
        raise typer.BadParameter("hours_per_day must be greater than zero")
    if padding_days is not None and padding_days < 0:
        raise typer.BadParameter("padding_days cannot be negative")
    if min_width_percent is not None and not (0 <= min_width_percent <= 100):
        raise typer.BadParameter("min_width_percent must be between 0 and 100")

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        left_column_width=left_column_width,
        hours_per_day=hours_per_day,
        padding_days=padding_days,
        fallback_days=fallback_days,
        min_width_percent=min_width_percent,
        log_level=log_level,
    )

    view()
