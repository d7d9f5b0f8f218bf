# SPDX-License-Identifier: MIT

"""
Events shaped like Google Calendar `events.list` items.

Credentials are not handled here. Items are read from a YAML or JSON export,
or handed to events_from_google by a caller holding an authorized client.
"""

import datetime
import logging
from pathlib import Path
from typing import Any, Optional

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore[assignment]

from daybound.errors import EventSourceError, MalformedEventError
from daybound.model.event import CalendarEvent
from daybound.source.fetch import MALFORMED_SKIP, handle_malformed
from daybound.template.event import make_calendar_event
from daybound.time import (
    TimezoneLike,
    date_at,
    date_from_str,
    datetime_from_str,
    python_to_pendulum,
)

logger = logging.getLogger(__name__)


def _parse_date_time(value: Any, tz: TimezoneLike) -> pendulum.DateTime:
    # YAML turns unquoted timestamps into datetime objects
    if isinstance(value, datetime.datetime):
        return python_to_pendulum(value, tz)
    parsed = datetime_from_str(value, tz)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"{value!r} is not a date and time")
    return parsed


def _parse_date(value: Any, tz: TimezoneLike) -> pendulum.DateTime:
    if isinstance(value, datetime.date):
        return python_to_pendulum(value, tz)
    return date_at(date_from_str(value), tz)


def _parse_time_field(
    field: Optional[dict[str, Any]], summary: str, tz: TimezoneLike
) -> tuple[pendulum.DateTime, bool]:
    """
    Raises:
        MalformedEventError: If the field has neither dateTime nor date, or
            holds a value that does not parse
    """
    if not isinstance(field, dict) or not (field.get("dateTime") or field.get("date")):
        raise MalformedEventError(
            f"event '{summary}' has neither dateTime nor date", summary=summary
        )

    try:
        if field.get("dateTime"):
            return _parse_date_time(field["dateTime"], tz), False
        return _parse_date(field["date"], tz), True
    except (ValueError, TypeError, AttributeError) as e:
        raise MalformedEventError(
            f"event '{summary}' has an unreadable time {field}: {e}", summary=summary
        ) from e


def event_from_google(item: dict[str, Any], tz: TimezoneLike = "local") -> CalendarEvent:
    """
    Convert one Google Calendar item to a CalendarEvent.

    Raises:
        MalformedEventError: If start or end is missing or does not parse
    """
    if not isinstance(item, dict):
        raise MalformedEventError(f"event item is not a mapping: {item!r}")
    summary = str(item.get("summary") or "")
    start, all_day = _parse_time_field(item.get("start"), summary, tz)
    end, _ = _parse_time_field(item.get("end"), summary, tz)
    return make_calendar_event(
        summary,
        start,
        end,
        color=item.get("colorId"),
        all_day=all_day,
    )


def events_from_google(
    items: list[dict[str, Any]],
    tz: TimezoneLike = "local",
    on_malformed: str = MALFORMED_SKIP,
) -> list[CalendarEvent]:
    events = []
    for item in items:
        try:
            events.append(event_from_google(item, tz))
        except MalformedEventError as e:
            handle_malformed(e, on_malformed)
    logger.debug("converted %d of %d items", len(events), len(items))
    return events


class GoogleEventsFileSource:
    """Google-shaped items stored in a YAML or JSON file."""

    def __init__(
        self,
        path: Path,
        tz: TimezoneLike = "local",
        on_malformed: str = MALFORMED_SKIP,
    ) -> None:
        self.path = path
        self.tz = tz
        self.on_malformed = on_malformed

    def get_events(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[CalendarEvent]:
        try:
            raw = load(self.path.read_text(encoding="utf-8"), Loader=SafeLoader)
        except (OSError, YAMLError) as e:
            raise EventSourceError(f"could not read events file {self.path}: {e}") from e

        if raw is None:
            return []
        if isinstance(raw, dict):
            raw = raw.get("items", [])
        if not isinstance(raw, list):
            raise EventSourceError(f"events file {self.path} must hold a list of events")

        events = events_from_google(raw, self.tz, self.on_malformed)
        return [
            event for event in events if event["start"] <= end and event["end"] >= start
        ]
