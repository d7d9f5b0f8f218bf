# SPDX-License-Identifier: MIT

import logging
from typing import Protocol

import pendulum

from daybound.errors import MalformedEventError
from daybound.model.event import CalendarEvent
from daybound.service.boundary import get_fetch_range
from daybound.time import TimezoneLike

logger = logging.getLogger(__name__)

MALFORMED_SKIP = "skip"
MALFORMED_FAIL = "fail"
MALFORMED_POLICIES = (MALFORMED_SKIP, MALFORMED_FAIL)


class EventSource(Protocol):
    def get_events(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[CalendarEvent]: ...


def handle_malformed(error: MalformedEventError, policy: str) -> None:
    """Skip (with a warning) or re-raise a malformed event per policy."""
    if policy == MALFORMED_FAIL:
        raise error
    logger.warning("skipping malformed event '%s': %s", error.summary, error)


def fetch_events_for_day(
    target_date: pendulum.Date,
    sources: list[EventSource],
    tz: TimezoneLike = "local",
) -> list[CalendarEvent]:
    """Collect events from every source over the range the resolver needs."""
    start, end = get_fetch_range(target_date, tz)
    logger.info("fetching events %s -> %s", start, end)

    events: list[CalendarEvent] = []
    for source in sources:
        source_events = source.get_events(start, end)
        logger.debug("%s returned %d events", type(source).__name__, len(source_events))
        events.extend(source_events)
    return events
