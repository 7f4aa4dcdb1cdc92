# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum

from weekgrid.layout.engine import compute_week_layout
from weekgrid.model.day import Day
from weekgrid.model.event import Event, RawEvent
from weekgrid.model.layout import WeekLayout
from weekgrid.model.week import Week
from weekgrid.time import datetime_to_day_header_str


class WeekCalendar:
    """Holds the layout of the most recently displayed week."""

    def __init__(self) -> None:
        self._layout: Optional[WeekLayout] = None

    @property
    def layout(self) -> WeekLayout:
        if self._layout is None:
            raise ValueError("calendar has not been updated yet")
        return self._layout

    @property
    def week(self) -> Week:
        return self.layout["week"]

    @property
    def days(self) -> list[Day]:
        return self.layout["days"]

    @property
    def events(self) -> list[Event]:
        return self.layout["events"]

    @property
    def current_week_day(self) -> int:
        return self.week["current_week_day"]

    def update(
        self, raw_events: Iterable[RawEvent], current_day: pendulum.DateTime
    ) -> None:
        """Recompute the layout from scratch for the week of `current_day`."""
        self._layout = compute_week_layout(raw_events, current_day)

    def get_number_of_bins_by_week_day(self, week_day: int) -> int:
        return len(self.days[week_day - 1]["bins"])

    def get_day_headers(self) -> list[str]:
        """Headers for the days of the week, for example `Tue 22 Sep`."""
        return [datetime_to_day_header_str(day["start"]) for day in self.days]

    def get_events_by_week_day(self, week_day: int) -> list[Event]:
        return [self.events[event_id] for event_id in self.days[week_day - 1]["events"]]
