# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

EVENTS_TIME_STEP_IN_MINUTES = 30
ONE_HOUR_IN_MS = 3_600_000


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_from_unix_timestamp(
    timestamp: int, tz: str = "local"
) -> pendulum.DateTime:
    return pendulum.from_timestamp(timestamp, tz=tz)


def datetime_from_str(datetime: str, tz: str = "local") -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime, tz=tz))


def datetime_to_display_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")


def datetime_to_day_header_str(datetime: pendulum.DateTime) -> str:
    """Format a day header like `Tue 22 Sep`."""
    return datetime.format("ddd D MMM")


def add_milliseconds(datetime: pendulum.DateTime, ms: int) -> pendulum.DateTime:
    return datetime.add(microseconds=ms * 1000)


def milliseconds_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return round((end - start).total_seconds() * 1000)


def round_start_time(start: pendulum.DateTime) -> pendulum.DateTime:
    """Round downward to the nearest time step, dropping seconds."""
    remainder = start.minute % EVENTS_TIME_STEP_IN_MINUTES
    return start.set(minute=start.minute - remainder, second=0, microsecond=0)


def round_end_time(end: pendulum.DateTime) -> pendulum.DateTime:
    """
    Round upward to the nearest time step and make the result inclusive.

    The returned instant is one millisecond before the step boundary, so
    `09:10` becomes `09:29:59.999`. Seconds are dropped before that, even
    when the minute is already on a boundary: `09:00:30` becomes
    `08:59:59.999`.
    """
    remainder = end.minute % EVENTS_TIME_STEP_IN_MINUTES
    rounded = end.set(second=0, microsecond=0)
    if remainder:
        rounded = rounded.add(minutes=EVENTS_TIME_STEP_IN_MINUTES - remainder)
    return add_milliseconds(rounded, -1)


def duration_in_ms(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return milliseconds_between(start, end) + 1


def duration_in_hours(duration: int) -> float:
    return duration / ONE_HOUR_IN_MS


def hours_since_midnight(datetime: pendulum.DateTime) -> float:
    return datetime.hour + datetime.minute / 60


def get_week_day(datetime: pendulum.DateTime) -> int:
    """Week day number where Monday is 1 and Sunday is 7."""
    return datetime.isoweekday()
