# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from weekgrid import configuration
from weekgrid.repository.configuration import CONFIGURATION_REPO
from weekgrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(config: configuration.Configuration, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "feed_paths",
        ", ".join(config["feed_paths"]) if config["feed_paths"] else "None",
    )
    table.add_row(
        "ics_paths",
        ", ".join(config["ics_paths"]) if config["ics_paths"] else "None",
    )
    table.add_row("day_width", str(config["day_width"]))
    table.add_row("granularity", str(config["granularity"]))
    table.add_row("start_hour", str(config["start_hour"]))
    table.add_row("end_hour", str(config["end_hour"]))
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config, "Configuration"))
    console.print(f"\nConfiguration file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Print the header"),
    ] = None,
    feed_paths: Annotated[
        Optional[list[str]],
        typer.Option("--feed-path", help="XML feed paths or URLs (accepts multiple)"),
    ] = None,
    remove_feed_paths: Annotated[
        bool, typer.Option("--remove-feed-paths", help="Remove all feed paths")
    ] = False,
    ics_paths: Annotated[
        Optional[list[str]],
        typer.Option("--ics-path", help="ICS file paths or URLs (accepts multiple)"),
    ] = None,
    remove_ics_paths: Annotated[
        bool, typer.Option("--remove-ics-paths", help="Remove all ICS paths")
    ] = False,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", help="Width of each day column in characters"),
    ] = None,
    granularity: Annotated[
        Optional[int],
        typer.Option("--granularity", help="Minutes per row: 15, 30, or 60"),
    ] = None,
    start_hour: Annotated[
        Optional[int], typer.Option("--start-hour", help="First hour displayed")
    ] = None,
    end_hour: Annotated[
        Optional[int], typer.Option("--end-hour", help="Hour the display stops at")
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, or ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    console = Console()

    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            feed_paths=feed_paths,
            ics_paths=ics_paths,
            day_width=day_width,
            granularity=granularity,
            start_hour=start_hour,
            end_hour=end_hour,
            log_level=log_level,
            remove_feed_paths=remove_feed_paths,
            remove_ics_paths=remove_ics_paths,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    config = CONFIGURATION_REPO.get_config()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, "Updated Configuration"))
