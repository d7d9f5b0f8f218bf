# SPDX-License-Identifier: MIT

"""
Rendering of calendar events as markdown event lines, and the recognizer
that reads them back.

An event line looks like:

    09:05 AM - <span style="display: inline-block; ...; background-color: #828bc2; ..."></span> **Standup**
"""

import re
from typing import Optional

from daybound.color import BOUNDARY_MARKER_COLOR, Theme, color_for
from daybound.model.event import CalendarEvent
from daybound.model.event_line import EventLine
from daybound.time import TimezoneLike, datetime_to_display_time_str

UNTITLED_EVENT = "Untitled Event"
DEFAULT_COLOR_ID = "1"

SWATCH_TEMPLATE = (
    '<span style="display: inline-block; width: 12px; height: 12px; '
    "background-color: {color}; border-radius: 2px; margin-right: 6px; "
    'vertical-align: middle;"></span>'
)

EVENT_LINE_PATTERN = re.compile(
    r"^ ?(\d{1,2}:\d{2}\s*[AP]M)\s*-\s*"
    r'<span style="display: inline-block;[^>]*></span>\s*'
    r"\*\*(.+?)\*\*"
)
SWATCH_COLOR_PATTERN = re.compile(r"background-color: (#[0-9a-fA-F]{6});")


def color_swatch(color: str) -> str:
    return SWATCH_TEMPLATE.format(color=color)


def event_title(event: CalendarEvent) -> str:
    # Line breaks inside a summary would split the event line in two
    summary = " ".join((event["summary"] or "").split())
    return summary if summary else UNTITLED_EVENT


def event_swatch_color(event: CalendarEvent, theme: Theme = Theme.DARK) -> str:
    if event["boundary_marker"]:
        return BOUNDARY_MARKER_COLOR
    return color_for(event["color"], theme)


def render_event_line(
    event: CalendarEvent, tz: TimezoneLike = "local", theme: Theme = Theme.DARK
) -> str:
    time = datetime_to_display_time_str(event["start"], tz)
    swatch = color_swatch(event_swatch_color(event, theme))
    return f"{time} - {swatch} **{event_title(event)}**"


def render_event_lines(
    events: list[CalendarEvent],
    tz: TimezoneLike = "local",
    theme: Theme = Theme.DARK,
) -> list[str]:
    return [render_event_line(event, tz, theme) for event in events]


def render_plain_line(event: CalendarEvent, tz: TimezoneLike = "local") -> str:
    """Plain text form used when printing to stdout instead of patching a note."""
    time = datetime_to_display_time_str(event["start"], tz)
    color_id = event["color"] or DEFAULT_COLOR_ID
    if event["boundary_marker"]:
        return f"{time} - BOUNDARY:{event_title(event)} - COLOR:{color_id}"
    return f"{time} - {event_title(event)} - COLOR:{color_id}"


def recognize_event_line(line: str) -> Optional[EventLine]:
    match = EVENT_LINE_PATTERN.match(line)
    if match is None:
        return None
    color_match = SWATCH_COLOR_PATTERN.search(line, match.start(), match.end())
    return {
        "time": match.group(1),
        "color": color_match.group(1) if color_match else None,
        "title": match.group(2),
    }


def is_event_line(line: str) -> bool:
    return EVENT_LINE_PATTERN.match(line) is not None
