# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

from weekgrid.model.day import Bin, Day, Gap
from weekgrid.model.event import Event
from weekgrid.time import add_milliseconds


def get_day_template(week_day: int, start: pendulum.DateTime) -> Day:
    return {
        "week_day": week_day,
        "start": start,
        "end": add_milliseconds(start.add(days=1), -1),
        "bins": [],
        "events": [],
    }


def get_bin_template(id: int, day: Day, event: Event) -> Bin:
    gap_before_event: Gap = {
        "start": day["start"],
        "end": add_milliseconds(event["start"], -1),
    }
    gap_after_event: Gap = {
        "start": add_milliseconds(event["end"], 1),
        "end": day["end"],
    }
    return {
        "id": id,
        "end": event["end"],
        "events": [cast(int, event["id"])],
        "gaps": [gap_before_event, gap_after_event],
    }
