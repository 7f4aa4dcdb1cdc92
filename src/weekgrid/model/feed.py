# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from weekgrid.model.event import RawEvent


class Feed(TypedDict):
    current_day: pendulum.DateTime
    events: list[RawEvent]
