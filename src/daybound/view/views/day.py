# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from daybound.color import MARKER_META_COLOR, WINDOW_META_COLOR, Theme
from daybound.model.day_window import DayWindow
from daybound.model.event import CalendarEvent
from daybound.service.render import event_swatch_color, event_title
from daybound.time import (
    TimezoneLike,
    date_to_str,
    datetime_to_display_local_datetime_str,
    datetime_to_display_time_str,
    duration_to_str,
)
from daybound.view.views.header import header


def window_description(window: DayWindow, tz: TimezoneLike = "local") -> str:
    start = datetime_to_display_local_datetime_str(window["start"], tz)
    end = datetime_to_display_local_datetime_str(window["end"], tz)
    length = duration_to_str(window["end"] - window["start"])
    return f"{start} -> {end} ({length})"


def day_view(
    target_date: pendulum.Date,
    window: DayWindow,
    events: list[CalendarEvent],
    tz: TimezoneLike = "local",
    theme: Theme = Theme.DARK,
    use_color: bool = True,
) -> None:
    header(date_to_str(target_date), window_description(window, tz))

    day_table = Table(box=box.SIMPLE)
    day_table.add_column("time")
    day_table.add_column("", width=2)
    day_table.add_column("title")
    day_table.add_column("end")

    for event in events:
        swatch = Text("■", style=event_swatch_color(event, theme)) if use_color else Text("")
        title = escape(event_title(event))
        if event["boundary_marker"]:
            title = f"[{MARKER_META_COLOR}]{title}[/{MARKER_META_COLOR}]"
            end = ""
        else:
            end = datetime_to_display_time_str(event["end"], tz)
        day_table.add_row(
            f"[{WINDOW_META_COLOR}]{datetime_to_display_time_str(event['start'], tz)}[/{WINDOW_META_COLOR}]",
            swatch,
            title,
            end,
        )

    console = Console()
    console.print(day_table)
