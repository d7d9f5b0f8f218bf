# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional

# Swatch color for the synthetic Wake Up / Sleep lines
BOUNDARY_MARKER_COLOR = "#7c7c7c"

# Rich styles used by the terminal views
WINDOW_META_COLOR = "cyan"
MARKER_META_COLOR = "bright_black"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class CalendarColor(Enum):
    """Google Calendar event colors keyed by their colorId.

    Each member carries the swatch hex for the light and the dark theme.
    """

    LAVENDER = ("1", "#a4bdfc", "#828bc2")
    SAGE = ("2", "#7ae7bf", "#33b679")
    GRAPE = ("3", "#dbadff", "#9e69af")
    FLAMINGO = ("4", "#ff887c", "#e67c73")
    BANANA = ("5", "#fbd75b", "#f6bf26")
    TANGERINE = ("6", "#ffb878", "#f4511e")
    PEACOCK = ("7", "#46d6db", "#039be5")
    GRAPHITE = ("8", "#e1e1e1", "#616161")
    BLUEBERRY = ("9", "#5484ed", "#3f51b5")
    BASIL = ("10", "#51b749", "#0b8043")
    TOMATO = ("11", "#dc2127", "#d50000")

    def __init__(self, color_id: str, light: str, dark: str) -> None:
        self.color_id = color_id
        self.light = light
        self.dark = dark

    def hex(self, theme: Theme) -> str:
        return self.dark if theme == Theme.DARK else self.light

    @classmethod
    def from_id(cls, color_id: Optional[str]) -> "CalendarColor":
        """Look up a color by id, defaulting to LAVENDER for unknown or missing ids."""
        for color in cls:
            if color.color_id == color_id:
                return color
        return cls.LAVENDER

    @classmethod
    def from_hex(cls, hex_value: str) -> Optional["CalendarColor"]:
        hex_value = hex_value.lower()
        for color in cls:
            if hex_value in (color.light, color.dark):
                return color
        return None


DEFAULT_COLOR = CalendarColor.LAVENDER


def color_for(color_id: Optional[str], theme: Theme = Theme.DARK) -> str:
    return CalendarColor.from_id(color_id).hex(theme)
