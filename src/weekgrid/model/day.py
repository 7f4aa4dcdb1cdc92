# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Gap(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime


class Bin(TypedDict):
    id: int
    end: pendulum.DateTime
    events: list[int]
    gaps: list[Gap]


class Day(TypedDict):
    week_day: int
    start: pendulum.DateTime
    end: pendulum.DateTime
    bins: list[Bin]
    events: list[int]
