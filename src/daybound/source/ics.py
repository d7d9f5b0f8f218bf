# SPDX-License-Identifier: MIT

import logging
from typing import Any

import icalevents.icalevents
import pendulum

from daybound.errors import EventSourceError, MalformedEventError
from daybound.model.event import CalendarEvent
from daybound.source.fetch import MALFORMED_SKIP, handle_malformed
from daybound.template.event import make_calendar_event
from daybound.time import TimezoneLike, python_to_pendulum

logger = logging.getLogger(__name__)


def is_url(ics_path: str) -> bool:
    return ics_path.startswith("http://") or ics_path.startswith("https://")


def event_from_ical(ical_event: Any, tz: TimezoneLike = "local") -> CalendarEvent:
    summary = ical_event.summary or ""
    if ical_event.start is None:
        raise MalformedEventError(f"event '{summary}' has no start", summary=summary)

    all_day = bool(getattr(ical_event, "all_day", False))
    start = python_to_pendulum(ical_event.start, tz)
    end = python_to_pendulum(ical_event.end, tz) if ical_event.end else start
    return make_calendar_event(summary, start, end, all_day=all_day)


class IcsEventSource:
    """Events from local .ics files or iCal URLs."""

    def __init__(
        self,
        ics_paths: list[str],
        tz: TimezoneLike = "local",
        on_malformed: str = MALFORMED_SKIP,
    ) -> None:
        self.ics_paths = ics_paths
        self.tz = tz
        self.on_malformed = on_malformed

    def _read(
        self, ics_path: str, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[Any]:
        try:
            if is_url(ics_path):
                return icalevents.icalevents.events(
                    url=ics_path, start=start, end=end, fix_apple=True
                )
            return icalevents.icalevents.events(
                file=ics_path, start=start, end=end, fix_apple=True
            )
        except Exception as e:
            raise EventSourceError(f"could not read iCal source {ics_path}: {e}") from e

    def get_events(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[CalendarEvent]:
        events: list[CalendarEvent] = []
        for ics_path in self.ics_paths:
            logger.info("reading iCal source %s", ics_path)
            for ical_event in self._read(ics_path, start, end):
                try:
                    events.append(event_from_ical(ical_event, self.tz))
                except MalformedEventError as e:
                    handle_malformed(e, self.on_malformed)
        return events
