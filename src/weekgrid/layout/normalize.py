# SPDX-License-Identifier: MIT

from typing import Iterable

from weekgrid.model.event import Event, RawEvent
from weekgrid.model.week import Week
from weekgrid.template.event import (
    get_event_from_raw_event,
    get_event_template,
    set_event_end,
)
from weekgrid.time import add_milliseconds


def is_planned_for_week(event: Event, week: Week) -> bool:
    # Ended before the week
    if event["end"] <= week["start"]:
        return False

    # Starts after the week
    if event["start"] > week["end"]:
        return False

    return True


def get_events_for_week(raw_events: Iterable[RawEvent], week: Week) -> list[Event]:
    """Normalize raw events and keep the ones that touch the week."""
    tz = week["start"].timezone
    events = []
    for raw_event in raw_events:
        event = get_event_from_raw_event(raw_event, tz)
        if not is_planned_for_week(event, week):
            continue
        events.append(event)
    return events


def starts_and_ends_the_same_day(event: Event) -> bool:
    # Calendar dates only: a day is 23 or 25 hours long across DST changes
    return event["start"].date() == event["end"].date()


def slice_one_day_from_event_end(event: Event) -> Event:
    """
    Carve the last calendar day off a multi-day event.

    The returned piece runs from midnight of the event's last day to the
    event's end; the event itself is shortened to end one millisecond
    before the piece starts.
    """
    end = event["end"]
    slice_start = end.start_of("day")
    piece = get_event_template(event["title"], slice_start, end)
    set_event_end(event, add_milliseconds(slice_start, -1))
    return piece


def split_events_by_days(events: list[Event], week: Week) -> None:
    """
    Split multi-day events in place into one event per calendar day.

    Events are visited from the end of the list so that appended pieces are
    never revisited. Pieces falling outside the week are dropped.
    """
    for index in range(len(events) - 1, -1, -1):
        event = events[index]

        while not starts_and_ends_the_same_day(event):
            piece = slice_one_day_from_event_end(event)

            if is_planned_for_week(event, week):
                if is_planned_for_week(piece, week):
                    events.append(piece)
                continue

            # The rest of the event is before the week; nothing more to carve
            if is_planned_for_week(piece, week):
                events[index] = piece
            break
