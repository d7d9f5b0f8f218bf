# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer

from daybound.errors import DayboundError
from daybound.model.day_window import DayWindow
from daybound.model.event import CalendarEvent
from daybound.repository.configuration import CONFIGURATION_REPO
from daybound.repository.document import DOCUMENT_REPO
from daybound.service.day_window import build_day
from daybound.service.reconcile import append_to_document, apply_to_document, summarize
from daybound.service.render import render_event_lines, render_plain_line
from daybound.source.fetch import EventSource, fetch_events_for_day
from daybound.source.google import GoogleEventsFileSource
from daybound.source.ics import IcsEventSource
from daybound.terminal.custom_typer import AliasedTyperGroup
from daybound.terminal.parse import parse_date
from daybound.view.views.day import day_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateArgument = Annotated[
    pendulum.Date,
    typer.Argument(
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
IcsOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--ics",
        "-i",
        help="iCal file or URL (repeatable); defaults to config.ics_paths",
    ),
]
EventsFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--events-file",
        "-f",
        help="YAML/JSON list of Google Calendar style events",
    ),
]


def build_sources(
    ics: Optional[list[str]], events_file: Optional[Path]
) -> list[EventSource]:
    config = CONFIGURATION_REPO.get_config()
    tz = config["timezone"]
    policy = config["malformed_events"]

    sources: list[EventSource] = []
    if events_file is not None:
        sources.append(GoogleEventsFileSource(events_file, tz, policy))

    ics_paths = ics if ics else config["ics_paths"]
    if ics_paths:
        sources.append(IcsEventSource(ics_paths, tz, policy))

    if len(sources) == 0:
        raise typer.BadParameter(
            "No event source: pass --ics/--events-file or set config.ics_paths"
        )
    return sources


def load_day(
    target_date: pendulum.Date, sources: list[EventSource]
) -> tuple[DayWindow, list[CalendarEvent]]:
    config = CONFIGURATION_REPO.get_config()
    tz = config["timezone"]
    events = fetch_events_for_day(target_date, sources, tz)
    logger.info("fetched %d events", len(events))
    return build_day(target_date, events, tz, CONFIGURATION_REPO.get_boundary_settings())


@app.command("show, s", no_args_is_help=True)
def show(
    target_date: DateArgument,
    ics: IcsOption = None,
    events_file: EventsFileOption = None,
    no_color: Annotated[bool, typer.Option("--no-color", "-nc")] = False,
) -> None:
    """Show the events of a custom day."""
    sources = build_sources(ics, events_file)
    try:
        window, events = load_day(target_date, sources)
    except DayboundError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    config = CONFIGURATION_REPO.get_config()
    day_view(
        target_date,
        window,
        events,
        config["timezone"],
        CONFIGURATION_REPO.get_theme(),
        use_color=not no_color,
    )


@app.command("print, p", no_args_is_help=True)
def print_day(
    target_date: DateArgument,
    ics: IcsOption = None,
    events_file: EventsFileOption = None,
) -> None:
    """Print '<time> - <title> - COLOR:<id>' lines, boundary markers prefixed."""
    sources = build_sources(ics, events_file)
    try:
        _, events = load_day(target_date, sources)
    except DayboundError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    tz = CONFIGURATION_REPO.get_config()["timezone"]
    for event in events:
        typer.echo(render_plain_line(event, tz))


@app.command("render, r", no_args_is_help=True)
def render(
    target_date: DateArgument,
    ics: IcsOption = None,
    events_file: EventsFileOption = None,
) -> None:
    """Print the markdown event lines of a custom day."""
    sources = build_sources(ics, events_file)
    try:
        _, events = load_day(target_date, sources)
    except DayboundError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    tz = CONFIGURATION_REPO.get_config()["timezone"]
    for line in render_event_lines(events, tz, CONFIGURATION_REPO.get_theme()):
        typer.echo(line)


@app.command("sync, y", no_args_is_help=True)
def sync(
    target_date: DateArgument,
    file: Annotated[
        Path,
        typer.Option("--file", help="note to update in place"),
    ],
    ics: IcsOption = None,
    events_file: EventsFileOption = None,
    append: Annotated[
        Optional[bool],
        typer.Option(
            "--append/--no-append",
            help="append the events when the note has none (default: config.append_when_missing)",
        ),
    ] = None,
) -> None:
    """Update the event lines of a note in place."""
    config = CONFIGURATION_REPO.get_config()
    tz = config["timezone"]
    should_append = (
        append if append is not None else config.get("append_when_missing", False)
    )
    sources = build_sources(ics, events_file)

    logger.info("=== sync %s into %s ===", target_date, file)
    try:
        document = DOCUMENT_REPO.read(file)
        _, events = load_day(target_date, sources)
        new_lines = render_event_lines(events, tz, CONFIGURATION_REPO.get_theme())
        logger.info("rendered %d event lines", len(new_lines))

        applied = apply_to_document(new_lines, document)
        if applied is None:
            if not should_append:
                typer.echo("NO_EXISTING_EVENTS")
                return
            DOCUMENT_REPO.write(append_to_document(new_lines, document))
            typer.echo(f"APPENDED:{len(new_lines)} added")
            return

        updated, result = applied
        DOCUMENT_REPO.write(updated)
    except DayboundError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    logger.info("=== success: %s ===", summarize(result))
    typer.echo(f"SUCCESS:{summarize(result)}")
