# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DayWindow(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime


def make_day_window(start: pendulum.DateTime, end: pendulum.DateTime) -> DayWindow:
    if not start < end:
        raise ValueError(f"day window start {start} must be before end {end}")
    return {"start": start, "end": end}
