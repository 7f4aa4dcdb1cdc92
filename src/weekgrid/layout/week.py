# SPDX-License-Identifier: MIT

import pendulum

from weekgrid.model.day import Day
from weekgrid.model.week import Week
from weekgrid.template.day import get_day_template
from weekgrid.time import add_milliseconds, get_week_day

DAYS_IN_WEEK = 7


def get_week_start(current_day: pendulum.DateTime) -> pendulum.DateTime:
    """Monday 00:00:00.000 of the week containing `current_day`."""
    week_day = get_week_day(current_day)
    return current_day.subtract(days=week_day - 1).start_of("day")


def get_week_end(week_start: pendulum.DateTime) -> pendulum.DateTime:
    return add_milliseconds(week_start.add(days=DAYS_IN_WEEK), -1)


def resolve_week(current_day: pendulum.DateTime) -> Week:
    week_start = get_week_start(current_day)
    return {
        "current_day": current_day,
        "current_week_day": get_week_day(current_day),
        "start": week_start,
        "end": get_week_end(week_start),
    }


def get_days(week: Week) -> list[Day]:
    """Allocate all seven days of the week, Monday first."""
    return [
        get_day_template(offset + 1, week["start"].add(days=offset))
        for offset in range(DAYS_IN_WEEK)
    ]
