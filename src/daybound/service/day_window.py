# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from daybound.model.day_window import DayWindow
from daybound.model.event import CalendarEvent
from daybound.service.boundary import BoundarySettings, resolve_day_window
from daybound.service.classify import (
    is_all_day,
    is_boundary_marker,
    is_sleep_tagged,
    overlaps,
)
from daybound.template.event import make_calendar_event
from daybound.time import TimezoneLike

logger = logging.getLogger(__name__)

WAKE_UP_TITLE = "Wake Up"
SLEEP_TITLE = "Sleep"
RESERVED_TITLES = (WAKE_UP_TITLE, SLEEP_TITLE)


def is_reserved_title(summary: str) -> bool:
    normalized = summary.strip().lower()
    return any(normalized == title.lower() for title in RESERVED_TITLES)


def make_boundary_markers(
    window: DayWindow,
) -> tuple[CalendarEvent, CalendarEvent]:
    wake_up = make_calendar_event(
        WAKE_UP_TITLE, window["start"], window["start"], boundary_marker=True
    )
    sleep = make_calendar_event(
        SLEEP_TITLE, window["end"], window["end"], boundary_marker=True
    )
    return wake_up, sleep


def select_day_events(
    target_date: pendulum.Date,
    window: DayWindow,
    events: list[CalendarEvent],
) -> list[CalendarEvent]:
    """
    Select and order the events belonging to one custom day.

    All-day events, untitled events and raw sleep events are dropped. Raw
    sleep events are replaced by the synthetic Wake Up / Sleep markers that
    bracket the result.

    Args:
        target_date: The calendar date of the day
        window: The resolved custom day window
        events: All fetched events

    Returns:
        [Wake Up marker] + kept events by start time + [Sleep marker]
    """
    kept: list[CalendarEvent] = []
    for event in events:
        if is_all_day(event):
            continue
        if not (event["summary"] or "").strip():
            continue
        if not overlaps(event, window):
            continue
        if is_boundary_marker(event):
            continue
        if is_sleep_tagged(event) or is_reserved_title(event["summary"]):
            logger.debug("dropping raw boundary event '%s'", event["summary"])
            continue
        kept.append(event)

    # sorted() is stable, so events sharing a start keep their source order
    kept = sorted(kept, key=lambda event: event["start"])

    wake_up, sleep = make_boundary_markers(window)
    logger.debug("%s: %d events inside the custom day", target_date, len(kept))
    return [wake_up, *kept, sleep]


def build_day(
    target_date: pendulum.Date,
    events: list[CalendarEvent],
    tz: TimezoneLike = "local",
    settings: Optional[BoundarySettings] = None,
) -> tuple[DayWindow, list[CalendarEvent]]:
    window = resolve_day_window(target_date, events, tz, settings)
    return window, select_day_events(target_date, window, events)
