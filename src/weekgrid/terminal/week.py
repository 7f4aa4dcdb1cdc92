# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from weekgrid.feed.error import FeedError
from weekgrid.repository.configuration import CONFIGURATION_REPO, VALID_GRANULARITIES
from weekgrid.service.calendar import WeekCalendar
from weekgrid.service.feed import load_calendar
from weekgrid.terminal.parse import parse_datetime
from weekgrid.view.layout import layout_view
from weekgrid.view.week import week_view

SourcesArgument = Annotated[
    Optional[list[str]],
    typer.Argument(
        help="XML feed files or URLs (defaults to config feed_paths)",
        show_default=False,
    ),
]
TodayOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--today",
        "-t",
        parser=parse_datetime,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, day offset like 1, -1, or Unix seconds",
    ),
]
IcsOption = Annotated[
    bool,
    typer.Option("--ics/--no-ics", help="Include events from config ics_paths"),
]


def _load(
    sources: Optional[list[str]], today: Optional[pendulum.DateTime], ics: bool
) -> WeekCalendar:
    config = CONFIGURATION_REPO.get_config()
    feed_paths = sources or config["feed_paths"] or []
    ics_paths = config["ics_paths"] if ics else None

    console = Console()
    if not feed_paths and not ics_paths:
        console.print(
            "[yellow]No feeds given and none configured in config.feed_paths[/yellow]"
        )
        raise typer.Exit(1)

    try:
        return load_calendar(feed_paths, ics_paths, today)
    except FeedError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def week(
    sources: SourcesArgument = None,
    today: TodayOption = None,
    ics: IcsOption = True,
    granularity: Annotated[
        Optional[int],
        typer.Option("--granularity", "-g", help="Minutes per row: 15, 30, or 60"),
    ] = None,
) -> None:
    """Lay out and display the week of the given feeds."""
    config = CONFIGURATION_REPO.get_config()
    if granularity is not None and granularity not in VALID_GRANULARITIES:
        raise typer.BadParameter(f"Granularity must be 15, 30, or 60, got {granularity}")

    calendar = _load(sources, today, ics)
    week_view(
        calendar,
        day_width=config["day_width"],
        granularity=granularity or config["granularity"],
        start_hour=config["start_hour"],
        end_hour=config["end_hour"],
    )


def layout(
    sources: SourcesArgument = None,
    today: TodayOption = None,
    ics: IcsOption = True,
) -> None:
    """Print the column and width computed for every event of the week."""
    calendar = _load(sources, today, ics)
    layout_view(calendar)
