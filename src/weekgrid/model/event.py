# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class RawEvent(TypedDict):
    title: str
    start: pendulum.DateTime
    end: pendulum.DateTime


class Event(TypedDict):
    id: Optional[int]
    title: str
    start: pendulum.DateTime
    start_in_hours: float
    end: pendulum.DateTime
    duration: int
    week_day: int
    bin: Optional[int]
    width: int
