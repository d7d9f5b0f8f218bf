# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated

import typer

from daybound.debug_log import configure_logging
from daybound.repository.configuration import CONFIGURATION_REPO
from daybound.terminal import configuration, day
from daybound.terminal.custom_typer import OrderedAliasedTyperGroup
from daybound.terminal.recolor import recolor
from daybound.terminal.version import version
from daybound.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="daybound - calendar days that start when you wake up",
    no_args_is_help=True,
)
app.add_typer(day.app, name="day, d", help="Resolve, show and sync a custom day")
app.add_typer(configuration.app, name="config, c", help="View and change settings")
app.command(name="recolor, rc")(recolor)
app.command(name="version, ve")(version)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logs on the console"),
    ] = False,
) -> None:
    """
    daybound - calendar days that start when you wake up

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        config = CONFIGURATION_REPO.get_config()
        log_path = Path(config["log_path"]) if config["log_path"] is not None else None
        configure_logging(config["log_level"], log_path, verbose=True)
        logging.getLogger(__name__).debug("verbose logging enabled")


def run() -> None:
    app()
