# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from daybound.model.event import CalendarEvent
from daybound.time import now_utc


def get_calendar_event_template() -> CalendarEvent:
    now = now_utc()
    return {
        "summary": "",
        "start": now,
        "end": now,
        "color": None,
        "all_day": False,
        "boundary_marker": False,
    }


def make_calendar_event(
    summary: str,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    color: Optional[str] = None,
    all_day: bool = False,
    boundary_marker: bool = False,
) -> CalendarEvent:
    event = get_calendar_event_template()
    event["summary"] = summary
    event["start"] = start
    event["end"] = end
    event["color"] = color
    event["all_day"] = all_day
    event["boundary_marker"] = boundary_marker
    return event
