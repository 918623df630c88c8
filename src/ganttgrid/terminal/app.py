# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from ganttgrid.logger import configure_logging
from ganttgrid.terminal import configuration, export, task
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.timeline import timeline
from ganttgrid.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="ganttgrid - Task timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(task.app, name="task, t")
app.add_typer(export.app, name="export, x")
app.command(name="timeline, tl")(timeline)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    ganttgrid - Task timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
