# SPDX-License-Identifier: MIT

from weekgrid.model.day import Bin, Day, Gap
from weekgrid.model.event import Event
from weekgrid.template.day import get_bin_template
from weekgrid.time import add_milliseconds


def compare_events(first: Event, second: Event) -> int:
    """
    Order events by start time, then by duration (shorter first).

    Events with the same start and duration compare as "greater" in both
    directions. `sort_events` relies on this to put the later of two tied
    events first.
    """
    if first["start"] < second["start"]:
        return -1
    if first["start"] > second["start"]:
        return 1
    if first["duration"] < second["duration"]:
        return -1
    if first["duration"] > second["duration"]:
        return 1
    return 1


def sort_events(events: list[Event]) -> None:
    """Insertion sort in place using `compare_events`."""
    for index in range(1, len(events)):
        event = events[index]
        position = index - 1
        while position >= 0 and compare_events(events[position], event) > 0:
            events[position + 1] = events[position]
            position -= 1
        events[position + 1] = event


def number_events(events: list[Event]) -> None:
    for index, event in enumerate(events):
        event["id"] = index


def group_events_by_days(events: list[Event], days: list[Day]) -> None:
    for index, event in enumerate(events):
        days[event["week_day"] - 1]["events"].append(index)


def create_new_bin_with_event(day: Day, event: Event) -> None:
    bin = get_bin_template(len(day["bins"]), day, event)
    day["bins"].append(bin)
    event["bin"] = bin["id"]


def put_event_into_bin(event: Event, bin: Bin) -> None:
    bin["events"].append(event["id"])  # type: ignore[arg-type]
    bin["end"] = event["end"]
    event["bin"] = bin["id"]

    gaps = bin["gaps"]
    gap = gaps[-1]

    if gap["start"] == event["start"]:
        # No hole between the previous occupant and this event
        gap["start"] = add_milliseconds(event["end"], 1)
    elif gap["end"] == event["end"]:
        gap["end"] = add_milliseconds(event["start"], -1)
    else:
        hole: Gap = {
            "start": gap["start"],
            "end": add_milliseconds(event["start"], -1),
        }
        gaps.insert(len(gaps) - 1, hole)
        gap["start"] = add_milliseconds(event["end"], 1)


def put_event_into_right_bin(event: Event, day: Day) -> None:
    for bin in day["bins"]:
        if event["start"] > bin["end"]:
            put_event_into_bin(event, bin)
            return
    create_new_bin_with_event(day, event)


def assign_bins(events: list[Event], days: list[Day]) -> None:
    """Place each day's events, in assignment order, into the first free bin."""
    for day in days:
        for event_id in day["events"]:
            put_event_into_right_bin(events[event_id], day)
