# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from weekgrid.color import get_color_for_title
from weekgrid.service.calendar import WeekCalendar
from weekgrid.time import datetime_to_display_date_str, datetime_to_display_time_str
from weekgrid.view.geometry import height_percent, horizontal_percent, top_percent
from weekgrid.view.header import header


def _percent(value: float) -> str:
    return f"{value:.1f}"


def layout_view(calendar: WeekCalendar, console: Optional[Console] = None) -> None:
    """
    List every laid out event with its day, column and width.

    The last four columns place the event within its day as percentages:
    offset from the top, height, and left and right insets.
    """
    week = calendar.week
    header(f"layout: week of {datetime_to_display_date_str(week['start'])}")

    if console is None:
        console = Console()

    table = Table(box=box.SIMPLE)
    table.add_column("id", justify="right")
    table.add_column("day")
    table.add_column("start")
    table.add_column("end")
    table.add_column("title")
    table.add_column("bin", justify="right")
    table.add_column("width", justify="right")
    table.add_column("bins", justify="right")
    table.add_column("top %", justify="right")
    table.add_column("height %", justify="right")
    table.add_column("left %", justify="right")
    table.add_column("right %", justify="right")

    for event in calendar.events:
        number_of_bins = calendar.get_number_of_bins_by_week_day(event["week_day"])
        left, right = horizontal_percent(
            event["bin"] or 0, event["width"], number_of_bins
        )
        table.add_row(
            str(event["id"]),
            datetime_to_display_date_str(event["start"]),
            datetime_to_display_time_str(event["start"]),
            datetime_to_display_time_str(event["end"]),
            event["title"],
            str(event["bin"]),
            str(event["width"]),
            str(number_of_bins),
            _percent(top_percent(event["start_in_hours"])),
            _percent(height_percent(event["duration"])),
            _percent(left),
            _percent(right),
            style=get_color_for_title(event["title"]),
        )

    console.print(table)
