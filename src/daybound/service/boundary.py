# SPDX-License-Identifier: MIT

"""
Custom day boundary resolution based on sleep events.

A day is defined as:
- Start: the end of the earliest sleep event longer than the nap threshold
  that ends on the target date, or midnight if there is none
- End: the start of the earliest sleep event after the day start that begins
  in the evening of the target date or on the following day, or 05:00 of
  the following day if there is none
"""

import logging
from typing import Optional, TypedDict

import pendulum

from daybound.model.day_window import DayWindow, make_day_window
from daybound.model.event import CalendarEvent
from daybound.service.classify import duration_hours, is_sleep_tagged
from daybound.time import TimezoneLike, date_at, is_same_day

logger = logging.getLogger(__name__)

NAP_THRESHOLD_HOURS = 2
EVENING_CUTOFF_HOUR = 18
DEFAULT_END_HOUR = 5


class BoundarySettings(TypedDict):
    nap_threshold_hours: float
    evening_cutoff_hour: int
    default_end_hour: int


def get_default_boundary_settings() -> BoundarySettings:
    return {
        "nap_threshold_hours": NAP_THRESHOLD_HOURS,
        "evening_cutoff_hour": EVENING_CUTOFF_HOUR,
        "default_end_hour": DEFAULT_END_HOUR,
    }


def get_day_start(
    target_date: pendulum.Date,
    events: list[CalendarEvent],
    tz: TimezoneLike = "local",
    settings: Optional[BoundarySettings] = None,
) -> pendulum.DateTime:
    """
    Find the start of the custom day for target_date.

    Only sleep events longer than the nap threshold that END on the target
    date qualify, so a short rest never resets the day. The earliest end
    wins.

    Args:
        target_date: The calendar date of the day
        events: Candidate events, typically fetched with get_fetch_range
        tz: Timezone used for calendar-day comparisons
        settings: Threshold overrides

    Returns:
        The instant the day starts
    """
    settings = settings or get_default_boundary_settings()
    default_start = date_at(target_date, tz)

    candidates = [
        event
        for event in events
        if is_sleep_tagged(event)
        and duration_hours(event) > settings["nap_threshold_hours"]
        and is_same_day(event["end"], target_date, tz)
    ]
    if len(candidates) == 0:
        return default_start

    # min() keeps the first of equal timestamps
    wake_event = min(candidates, key=lambda event: event["end"])
    logger.debug(
        "day start from '%s' ending %s", wake_event["summary"], wake_event["end"]
    )
    return wake_event["end"]


def get_day_end(
    target_date: pendulum.Date,
    events: list[CalendarEvent],
    day_start: pendulum.DateTime,
    tz: TimezoneLike = "local",
    settings: Optional[BoundarySettings] = None,
) -> pendulum.DateTime:
    """
    Find the end of the custom day for target_date.

    A sleep event qualifies when it starts after day_start and either starts
    at or after the evening cutoff of the target date or on the next calendar
    day. The earliest start wins.
    """
    settings = settings or get_default_boundary_settings()
    default_end = date_at(target_date, tz, hour=settings["default_end_hour"], days=1)
    evening_cutoff = date_at(target_date, tz, hour=settings["evening_cutoff_hour"])
    next_day = target_date.add(days=1)

    candidates = []
    for event in events:
        if not is_sleep_tagged(event):
            continue
        start = event["start"]
        if start <= day_start:
            continue
        in_evening = start >= evening_cutoff and is_same_day(start, target_date, tz)
        if in_evening or is_same_day(start, next_day, tz):
            candidates.append(event)

    if len(candidates) == 0:
        return default_end

    sleep_event = min(candidates, key=lambda event: event["start"])
    logger.debug(
        "day end from '%s' starting %s", sleep_event["summary"], sleep_event["start"]
    )
    return sleep_event["start"]


def resolve_day_window(
    target_date: pendulum.Date,
    events: list[CalendarEvent],
    tz: TimezoneLike = "local",
    settings: Optional[BoundarySettings] = None,
) -> DayWindow:
    day_start = get_day_start(target_date, events, tz, settings)
    day_end = get_day_end(target_date, events, day_start, tz, settings)
    logger.info("custom day %s: %s -> %s", target_date, day_start, day_end)
    return make_day_window(day_start, day_end)


def get_fetch_range(
    target_date: pendulum.Date, tz: TimezoneLike = "local"
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Range of events to fetch so sleep events from adjacent days are seen.

    Returns:
        Midnight of the previous day and the last instant of the day after
        the next one
    """
    start = date_at(target_date, tz, days=-1)
    end = date_at(target_date, tz, days=2).end_of("day")
    return start, end
