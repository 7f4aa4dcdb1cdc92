# SPDX-License-Identifier: MIT

from typing import Union

import pendulum

from weekgrid.model.event import Event, RawEvent
from weekgrid.time import (
    duration_in_ms,
    get_week_day,
    hours_since_midnight,
    round_end_time,
    round_start_time,
)


def get_event_template(
    title: str, start: pendulum.DateTime, end: pendulum.DateTime
) -> Event:
    return {
        "id": None,
        "title": title,
        "start": start,
        "start_in_hours": hours_since_midnight(start),
        "end": end,
        "duration": duration_in_ms(start, end),
        "week_day": get_week_day(start),
        "bin": None,
        "width": 1,
    }


def get_event_from_raw_event(
    raw_event: RawEvent, tz: Union[str, pendulum.Timezone, pendulum.FixedTimezone]
) -> Event:
    """Build a layout event with times rounded to the grid in timezone `tz`."""
    start = round_start_time(raw_event["start"].in_tz(tz))
    end = round_end_time(raw_event["end"].in_tz(tz))
    return get_event_template(raw_event["title"], start, end)


def set_event_end(event: Event, end: pendulum.DateTime) -> None:
    event["end"] = end
    event["duration"] = duration_in_ms(event["start"], end)
