# SPDX-License-Identifier: MIT

from typing import Iterable

import pendulum

from weekgrid.layout.bins import (
    assign_bins,
    group_events_by_days,
    number_events,
    sort_events,
)
from weekgrid.layout.normalize import get_events_for_week, split_events_by_days
from weekgrid.layout.week import get_days, resolve_week
from weekgrid.layout.widen import fill_available_gaps
from weekgrid.logger import get_logger
from weekgrid.model.event import RawEvent
from weekgrid.model.layout import WeekLayout

logger = get_logger(__name__)


def compute_week_layout(
    raw_events: Iterable[RawEvent], current_day: pendulum.DateTime
) -> WeekLayout:
    """
    Lay out the events of the week containing `current_day`.

    Every call starts from scratch: events are rounded to the time grid,
    filtered to the week, split by days, sorted, put into bins and finally
    widened into free neighbouring bins.

    Args:
        raw_events: Events as read from a feed
        current_day: Any instant within the week to lay out

    Returns:
        The week, its seven days with their bins, and the laid out events
    """
    week = resolve_week(current_day)
    days = get_days(week)

    events = get_events_for_week(raw_events, week)
    logger.debug("%d events planned for week of %s", len(events), week["start"])

    split_events_by_days(events, week)
    sort_events(events)
    number_events(events)
    group_events_by_days(events, days)
    logger.debug("%d single-day events after splitting", len(events))

    assign_bins(events, days)
    fill_available_gaps(events, days)
    logger.debug(
        "bins per day: %s", ", ".join(str(len(day["bins"])) for day in days)
    )

    return {"week": week, "days": days, "events": events}
