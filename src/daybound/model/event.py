# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class CalendarEvent(TypedDict):
    summary: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    color: Optional[str]
    all_day: bool
    boundary_marker: bool
