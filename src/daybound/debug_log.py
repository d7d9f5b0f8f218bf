# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from daybound import configuration

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: str = "INFO",
    log_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    """
    Send daybound logs to stderr through rich and append them to the debug log.

    The debug log always records DEBUG and up so a failed run can be traced
    after the fact; the console only shows level (or DEBUG when verbose).
    """
    logger = logging.getLogger("daybound")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True), show_path=False, markup=False
    )
    console_handler.setLevel(logging.DEBUG if verbose else level.upper())
    logger.addHandler(console_handler)

    path = log_path or configuration.DEFAULT_DEBUG_LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as e:
        logger.warning("debug log %s unavailable: %s", path, e)
        return
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
