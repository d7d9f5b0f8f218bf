# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from daybound.errors import InvalidDateError
from daybound.time import date_from_str


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a target date.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    like 1 or -1.

    Raises:
        typer.BadParameter: If the value is not a valid date
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^-?\d{1,5}$", date):
        return pendulum.today("local").add(days=int(date)).date()
    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").date()

    try:
        return date_from_str(date)
    except InvalidDateError as e:
        raise typer.BadParameter(str(e)) from e


def parse_hour(hour_param: Optional[str | int]) -> Optional[int]:
    if hour_param is None:
        return None
    try:
        hour = int(hour_param)
    except ValueError as e:
        raise typer.BadParameter(f"Hour must be a number, got '{hour_param}'") from e
    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    return hour
