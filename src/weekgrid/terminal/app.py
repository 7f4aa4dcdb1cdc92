# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from weekgrid.logger import setup_logger
from weekgrid.terminal import configuration
from weekgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from weekgrid.terminal.week import layout, week
from weekgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="weekgrid - Weekly calendar layout in the CLI",
    no_args_is_help=True,
)
app.command(name="week, w")(week)
app.command(name="layout, l")(layout)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    weekgrid - Weekly calendar layout in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        setup_logger("DEBUG")


def run() -> None:
    app()
