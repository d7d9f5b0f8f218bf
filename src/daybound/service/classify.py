# SPDX-License-Identifier: MIT

"""
Pure predicates over calendar events.

These are the leaf helpers shared by the boundary resolver and the day
window filter. None of them look at wall-clock time.
"""

from daybound.model.day_window import DayWindow
from daybound.model.event import CalendarEvent

SLEEP_KEYWORD = "sleep"


def is_all_day(event: CalendarEvent) -> bool:
    return event["all_day"]


def is_sleep_tagged(event: CalendarEvent) -> bool:
    return SLEEP_KEYWORD in (event["summary"] or "").lower()


def is_boundary_marker(event: CalendarEvent) -> bool:
    return event["boundary_marker"]


def duration_hours(event: CalendarEvent) -> float:
    return (event["end"] - event["start"]).total_seconds() / 3600


def starts_inside(event: CalendarEvent, window: DayWindow) -> bool:
    return window["start"] <= event["start"] < window["end"]


def ends_inside(event: CalendarEvent, window: DayWindow) -> bool:
    return window["start"] < event["end"] <= window["end"]


def spans_window(event: CalendarEvent, window: DayWindow) -> bool:
    return event["start"] < window["start"] and event["end"] > window["end"]


def overlaps(event: CalendarEvent, window: DayWindow) -> bool:
    """
    Check whether an event belongs to a window.

    An event overlaps when it starts inside the window, ends inside it, or
    spans across the whole of it. Touching an edge from the outside (ending
    exactly at the window start, starting exactly at the window end) does
    not count.

    Args:
        event: The event to test
        window: The custom day window

    Returns:
        True if the event overlaps the window
    """
    return (
        starts_inside(event, window)
        or ends_inside(event, window)
        or spans_window(event, window)
    )
