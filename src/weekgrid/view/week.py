# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

from weekgrid.color import CURRENT_DAY_COLOR, EMPTY_SLOT_COLOR, get_color_for_title
from weekgrid.model.day import Day
from weekgrid.model.event import Event
from weekgrid.service.calendar import WeekCalendar
from weekgrid.time import (
    add_milliseconds,
    datetime_to_display_date_str,
    datetime_to_display_time_str,
)
from weekgrid.view.geometry import column_span
from weekgrid.view.header import header

# Borders (2) and horizontal padding (2) of a day panel
PANEL_CHROME_WIDTH = 4
MINUTES_IN_DAY = 24 * 60


def week_view(
    calendar: WeekCalendar,
    day_width: int = 24,
    granularity: int = 30,
    start_hour: int = 8,
    end_hour: int = 20,
    console: Optional[Console] = None,
) -> None:
    """
    Display the calendar's week as seven day columns side by side.

    Args:
        calendar: An updated calendar
        day_width: Width of each day column in characters
        granularity: Minutes per row (15, 30, or 60)
        start_hour: First hour shown (default 8)
        end_hour: Hour at which the timeline stops (default 20)
        console: Console to print to (defaults to a new one)
    """
    week = calendar.week
    header(
        f"{datetime_to_display_date_str(week['start'])} - "
        f"{datetime_to_display_date_str(week['end'])}"
    )

    if console is None:
        console = Console()

    slot_starts = _get_slot_starts(start_hour, end_hour, granularity)

    columns: list[RenderableType] = [_render_time_axis(calendar.days[0], slot_starts)]
    for day, day_header in zip(calendar.days, calendar.get_day_headers()):
        columns.append(
            _render_day_column(
                day,
                calendar.get_events_by_week_day(day["week_day"]),
                day_header,
                day["week_day"] == calendar.current_week_day,
                day_width - PANEL_CHROME_WIDTH,
                granularity,
                slot_starts,
            )
        )

    console.print()
    console.print(Columns(columns, equal=False, expand=False, padding=(0, 0)))
    console.print()


def _get_slot_starts(start_hour: int, end_hour: int, granularity: int) -> list[int]:
    """Minutes from midnight at which each row starts."""
    return list(range(start_hour * 60, end_hour * 60, granularity))


def _slot_time(day: Day, minutes: int) -> pendulum.DateTime:
    """Wall-clock time `minutes` after midnight of `day`; 24:00 is the next midnight."""
    if minutes >= MINUTES_IN_DAY:
        return add_milliseconds(day["end"], 1)
    return day["start"].set(hour=minutes // 60, minute=minutes % 60)


def _render_time_axis(day: Day, slot_starts: list[int]) -> Panel:
    lines = [
        Text(datetime_to_display_time_str(_slot_time(day, minutes)), style="dim")
        for minutes in slot_starts
    ]
    return Panel(Text("\n").join(lines), title=" ", width=5 + PANEL_CHROME_WIDTH)


def _render_day_column(
    day: Day,
    events: list[Event],
    day_header: str,
    is_today: bool,
    inner_width: int,
    granularity: int,
    slot_starts: list[int],
) -> Panel:
    number_of_bins = len(day["bins"])
    first_visible = _slot_time(day, slot_starts[0]) if slot_starts else None
    lines: list[Text] = []

    for slot_index, minutes in enumerate(slot_starts):
        slot_start = _slot_time(day, minutes)
        slot_end = _slot_time(day, minutes + granularity)

        cells: list[tuple[str, str]] = [("·", EMPTY_SLOT_COLOR)] + [
            (" ", "") for _ in range(inner_width - 1)
        ]

        for event in events:
            if event["start"] >= slot_end or event["end"] < slot_start:
                continue

            offset, length = column_span(
                event["bin"] or 0, event["width"], number_of_bins, inner_width
            )
            # Title on the event's first visible row
            label = ""
            if event["start"] >= slot_start or slot_index == 0:
                label = event["title"]
            text = label[:length].ljust(length)

            style = f"black on {get_color_for_title(event['title'])}"
            for position, character in enumerate(text):
                cells[offset + position] = (character, style)

        line = Text()
        for character, style in cells:
            line.append(character, style=style)
        lines.append(line)

    hidden = _count_hidden_events(events, first_visible, day, slot_starts, granularity)
    subtitle = f"+{hidden} hidden" if hidden else None

    return Panel(
        Text("\n").join(lines),
        title=f"[bold]{day_header}[/bold]",
        subtitle=subtitle,
        width=inner_width + PANEL_CHROME_WIDTH,
        border_style=CURRENT_DAY_COLOR if is_today else "",
    )


def _count_hidden_events(
    events: list[Event],
    first_visible: Optional[pendulum.DateTime],
    day: Day,
    slot_starts: list[int],
    granularity: int,
) -> int:
    """Number of events entirely outside the displayed hours."""
    if first_visible is None:
        return len(events)
    last_visible = _slot_time(day, slot_starts[-1] + granularity)
    return len(
        [
            event
            for event in events
            if event["end"] < first_visible or event["start"] >= last_visible
        ]
    )
