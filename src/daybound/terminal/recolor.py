# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from daybound.color import Theme
from daybound.errors import DocumentIOError
from daybound.repository.document import DOCUMENT_REPO
from daybound.service.recolor import migrate_theme, normalize_marker_colors

logger = logging.getLogger(__name__)


def recolor(
    paths: Annotated[list[Path], typer.Argument(help="notes to update")],
    from_theme: Annotated[
        Optional[Theme], typer.Option("--from-theme", help="palette currently in the notes")
    ] = None,
    to_theme: Annotated[
        Optional[Theme], typer.Option("--to-theme", help="palette to move the notes to")
    ] = None,
    markers: Annotated[
        bool, typer.Option("--markers", "-m", help="grey out Wake Up / Sleep swatches")
    ] = False,
) -> None:
    """Rewrite event swatch colors in existing notes."""
    if (from_theme is None) != (to_theme is None):
        raise typer.BadParameter("--from-theme and --to-theme go together")
    if from_theme is None and not markers:
        raise typer.BadParameter("nothing to do: pass --from-theme/--to-theme or --markers")

    console = Console()
    files_changed = 0
    total_changes = 0
    for path in paths:
        try:
            document = DOCUMENT_REPO.read(path)
        except DocumentIOError as e:
            logger.error("%s", e)
            raise typer.Exit(code=1) from e

        lines = document["lines"]
        changes = 0
        if from_theme is not None and to_theme is not None:
            lines, changed = migrate_theme(lines, from_theme, to_theme)
            changes += changed
        if markers:
            lines, changed = normalize_marker_colors(lines)
            changes += changed

        if changes == 0:
            console.print(f"[bright_black]{path.name}: no changes needed[/bright_black]")
            continue

        document["lines"] = lines
        try:
            DOCUMENT_REPO.write(document)
        except DocumentIOError as e:
            logger.error("%s", e)
            raise typer.Exit(code=1) from e
        console.print(f"[green]{path.name}: updated {changes} line(s)[/green]")
        files_changed += 1
        total_changes += changes

    console.print(f"[cyan]Files changed: {files_changed}, lines updated: {total_changes}[/cyan]")
