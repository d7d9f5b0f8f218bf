# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from daybound import configuration
from daybound.color import Theme
from daybound.configuration import Configuration
from daybound.repository.configuration import CONFIGURATION_REPO
from daybound.source.fetch import MALFORMED_POLICIES
from daybound.terminal.custom_typer import AliasedTyperGroup
from daybound.terminal.parse import parse_hour

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "ics_paths",
        ", ".join(config["ics_paths"]) if config["ics_paths"] else "None",
    )
    table.add_row("theme", config["theme"])
    table.add_row("timezone", config["timezone"])
    table.add_row("nap_threshold_hours", str(config["nap_threshold_hours"]))
    table.add_row("evening_cutoff_hour", str(config["evening_cutoff_hour"]))
    table.add_row("default_end_hour", str(config["default_end_hour"]))
    table.add_row("malformed_events", config["malformed_events"])
    table.add_row(
        "append_when_missing",
        "✓ Enabled" if config.get("append_when_missing", False) else "✗ Disabled",
    )
    table.add_row(
        "log_path",
        config["log_path"]
        if config["log_path"]
        else f"None ({configuration.DEFAULT_DEBUG_LOG_PATH})",
    )
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(configuration_table(CONFIGURATION_REPO.get_config()))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    ics_paths: Annotated[
        Optional[list[str]],
        typer.Option("--ics-path", help="ICS file paths or URLs (accepts multiple)"),
    ] = None,
    remove_ics_paths: Annotated[
        bool, typer.Option("--remove-ics-paths", help="Remove all ICS paths")
    ] = False,
    theme: Annotated[
        Optional[Theme], typer.Option("--theme", help="swatch palette for new lines")
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="IANA timezone name, or 'local'"),
    ] = None,
    nap_threshold_hours: Annotated[
        Optional[float],
        typer.Option(
            "--nap-threshold-hours",
            help="sleep events must be longer than this to start a day",
        ),
    ] = None,
    evening_cutoff_hour: Annotated[
        Optional[int],
        typer.Option(
            "--evening-cutoff-hour",
            parser=parse_hour,
            help="sleep starting before this hour does not end the day",
        ),
    ] = None,
    default_end_hour: Annotated[
        Optional[int],
        typer.Option(
            "--default-end-hour",
            parser=parse_hour,
            help="hour of the next day the day ends at without a sleep event",
        ),
    ] = None,
    malformed_events: Annotated[
        Optional[str],
        typer.Option("--malformed-events", help="skip or fail"),
    ] = None,
    append_when_missing: Annotated[
        Optional[bool],
        typer.Option(
            "--append-when-missing/--no-append-when-missing",
            help="append events to notes that have no event lines yet",
        ),
    ] = None,
    log_path: Annotated[
        Optional[str], typer.Option("--log-path", help="debug log file")
    ] = None,
    remove_log_path: Annotated[
        bool, typer.Option("--remove-log-path", help="use the default debug log")
    ] = False,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help="console log level")
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if malformed_events is not None and malformed_events not in MALFORMED_POLICIES:
        raise typer.BadParameter(
            f"--malformed-events must be one of {', '.join(MALFORMED_POLICIES)}"
        )
    if nap_threshold_hours is not None and nap_threshold_hours < 0:
        raise typer.BadParameter("--nap-threshold-hours must not be negative")

    CONFIGURATION_REPO.update_config(
        ics_paths=ics_paths,
        remove_ics_paths=remove_ics_paths,
        theme=theme.value if theme is not None else None,
        timezone=timezone,
        nap_threshold_hours=nap_threshold_hours,
        evening_cutoff_hour=evening_cutoff_hour,
        default_end_hour=default_end_hour,
        malformed_events=malformed_events,
        log_path=log_path,
        remove_log_path=remove_log_path,
        log_level=log_level,
        append_when_missing=append_when_missing,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        configuration_table(CONFIGURATION_REPO.get_config(), "Updated Configuration")
    )
