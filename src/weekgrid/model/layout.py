# SPDX-License-Identifier: MIT

from typing import TypedDict

from weekgrid.model.day import Day
from weekgrid.model.event import Event
from weekgrid.model.week import Week


class WeekLayout(TypedDict):
    week: Week
    days: list[Day]
    events: list[Event]
