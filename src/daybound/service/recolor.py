# SPDX-License-Identifier: MIT

"""Rewrite swatch colors of event lines that were already written to a note."""

import logging

from daybound.color import BOUNDARY_MARKER_COLOR, CalendarColor, Theme
from daybound.service.day_window import is_reserved_title
from daybound.service.render import SWATCH_COLOR_PATTERN, recognize_event_line

logger = logging.getLogger(__name__)


def _replace_swatch_color(line: str, color: str) -> str:
    return SWATCH_COLOR_PATTERN.sub(f"background-color: {color};", line, count=1)


def migrate_theme(
    lines: list[str], from_theme: Theme, to_theme: Theme
) -> tuple[list[str], int]:
    """
    Move every event swatch from one palette to the other.

    Swatches whose color is not part of from_theme are left alone, so running
    a migration twice is harmless.

    Returns:
        The rewritten lines and the number of lines changed
    """
    changed = 0
    updated_lines = []
    for line in lines:
        event_line = recognize_event_line(line)
        if event_line is None or event_line["color"] is None:
            updated_lines.append(line)
            continue

        color = CalendarColor.from_hex(event_line["color"])
        if color is None or color.hex(from_theme) != event_line["color"].lower():
            updated_lines.append(line)
            continue

        new_line = _replace_swatch_color(line, color.hex(to_theme))
        if new_line != line:
            logger.debug(
                "%s: %s -> %s", event_line["title"], event_line["color"], color.hex(to_theme)
            )
            changed += 1
        updated_lines.append(new_line)
    return updated_lines, changed


def normalize_marker_colors(lines: list[str]) -> tuple[list[str], int]:
    """Give every Wake Up and Sleep line the boundary marker color."""
    changed = 0
    updated_lines = []
    for line in lines:
        event_line = recognize_event_line(line)
        if event_line is None or not is_reserved_title(event_line["title"]):
            updated_lines.append(line)
            continue

        new_line = _replace_swatch_color(line, BOUNDARY_MARKER_COLOR)
        if new_line != line:
            changed += 1
        updated_lines.append(new_line)
    return updated_lines, changed
