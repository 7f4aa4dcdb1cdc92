# SPDX-License-Identifier: MIT

from pathlib import Path

import icalevents.icalevents
import pendulum

from weekgrid.feed.error import FeedError
from weekgrid.feed.xml_feed import is_url
from weekgrid.logger import get_logger
from weekgrid.model.event import RawEvent
from weekgrid.model.week import Week

logger = get_logger(__name__)


def read_ics_events(ics_path: str, week: Week) -> list[RawEvent]:
    """
    Read the events of `week` from an iCal file or URL.

    Events without an end are read as zero-length events at their start.
    """
    logger.info("reading iCal source %s", ics_path)
    try:
        if is_url(ics_path):
            ical_events = icalevents.icalevents.events(
                url=ics_path,
                start=week["start"],
                end=week["end"],
                fix_apple=True,
            )
        else:
            ical_events = icalevents.icalevents.events(
                file=Path(ics_path).expanduser(),
                start=week["start"],
                end=week["end"],
            )
    except Exception as e:
        raise FeedError(f"cannot read iCal source {ics_path}: {e}")

    tz = week["start"].timezone
    raw_events: list[RawEvent] = []
    for ical_event in ical_events:
        if ical_event.start is None:
            logger.warning("skipping iCal event without start: %s", ical_event.uid)
            continue

        start = pendulum.instance(ical_event.start, tz=tz)
        end = pendulum.instance(ical_event.end, tz=tz) if ical_event.end else start
        raw_events.append(
            {
                "title": ical_event.summary or "",
                "start": start,
                "end": end,
            }
        )
    return raw_events
