# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from rich import print

from daybound.configuration import APP_NAME


def version() -> None:
    """Show the installed daybound version."""
    try:
        installed = package_version(APP_NAME)
    except PackageNotFoundError:
        installed = "unknown"
    print(f"[dark_orange]{APP_NAME}[/dark_orange] {installed}")
