# SPDX-License-Identifier: MIT

from weekgrid.model.day import Bin, Day
from weekgrid.model.event import Event
from weekgrid.time import add_milliseconds


def maybe_widen_event(event: Event, bin: Bin) -> bool:
    """
    Claim free time in `bin` for `event` if the event fits in it.

    Gaps that end before the event starts are dropped along the way: events
    are widened in start order, so no later event can use them either.

    Returns:
        True if the event can be widened into the bin
    """
    gaps = bin["gaps"]
    if not gaps:
        return bin["end"] < event["start"]

    index = 0
    while index < len(gaps):
        gap = gaps[index]

        if event["start"] > gap["end"]:
            del gaps[index]
            continue

        if event["start"] < gap["start"]:
            return False

        if event["end"] > gap["end"]:
            # Overflow past the bin's last occupant is not a conflict
            if event["start"] >= bin["end"]:
                del gaps[index]
                return True
            return False

        if event["end"] == gap["end"]:
            del gaps[index]
        else:
            gap["start"] = add_milliseconds(event["end"], 1)
        return True

    return False


def widen_event(event: Event, day: Day) -> None:
    bins = day["bins"]
    while event["bin"] is not None:
        bin_number = event["bin"] + event["width"]
        if bin_number >= len(bins):
            break
        if not maybe_widen_event(event, bins[bin_number]):
            break
        event["width"] += 1


def fill_available_gaps(events: list[Event], days: list[Day]) -> None:
    """Expand events' width into neighbouring bins when there is room."""
    for day in days:
        for event_id in day["events"]:
            widen_event(events[event_id], day)
