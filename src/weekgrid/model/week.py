# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Week(TypedDict):
    current_day: pendulum.DateTime
    current_week_day: int
    start: pendulum.DateTime
    end: pendulum.DateTime
