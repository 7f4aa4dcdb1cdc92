# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from weekgrid.feed.ics import read_ics_events
from weekgrid.feed.xml_feed import read_feed
from weekgrid.layout.week import resolve_week
from weekgrid.logger import get_logger
from weekgrid.model.event import RawEvent
from weekgrid.service.calendar import WeekCalendar
from weekgrid.time import now_local

logger = get_logger(__name__)


def load_calendar(
    feed_paths: list[str],
    ics_paths: Optional[list[str]] = None,
    today: Optional[pendulum.DateTime] = None,
) -> WeekCalendar:
    """
    Read every source and lay out the week.

    The week shown is the one containing `today` when given, otherwise the
    one named by the first XML feed, otherwise the current week.

    Args:
        feed_paths: XML feed files or URLs, read in order
        ics_paths: iCal files or URLs, read after the XML feeds
        today: Day whose week to show

    Returns:
        An updated calendar
    """
    raw_events: list[RawEvent] = []
    current_day = today

    for feed_path in feed_paths:
        feed = read_feed(feed_path)
        if current_day is None:
            current_day = feed["current_day"]
        raw_events.extend(feed["events"])

    if current_day is None:
        current_day = now_local()

    if ics_paths:
        week = resolve_week(current_day)
        for ics_path in ics_paths:
            raw_events.extend(read_ics_events(ics_path, week))

    logger.info("laying out %d events", len(raw_events))
    calendar = WeekCalendar()
    calendar.update(raw_events, current_day)
    return calendar
