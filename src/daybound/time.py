# SPDX-License-Identifier: MIT

import datetime
from typing import Union, cast

import pendulum

from daybound.errors import InvalidDateError

TimezoneLike = Union[str, pendulum.Timezone, pendulum.FixedTimezone]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum(
    python_value: Union[datetime.datetime, datetime.date], tz: TimezoneLike = "local"
) -> pendulum.DateTime:
    if not isinstance(python_value, datetime.datetime):
        return pendulum.datetime(
            python_value.year, python_value.month, python_value.day, tz=tz
        )
    return pendulum.instance(python_value, tz=tz)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date.

    Raises:
        InvalidDateError: If the string is not a valid calendar date
    """
    try:
        parsed = pendulum.from_format(date_str.strip(), "YYYY-MM-DD")
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date format '{date_str}'. Use YYYY-MM-DD"
        ) from e
    return parsed.date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def datetime_from_str(datetime: str, tz: TimezoneLike = "local") -> pendulum.DateTime:
    """Parse an ISO-8601 timestamp; naive values are read in tz."""
    return cast(pendulum.DateTime, pendulum.parse(datetime, tz=tz))


def date_at(
    date: pendulum.Date,
    tz: TimezoneLike = "local",
    hour: int = 0,
    minute: int = 0,
    days: int = 0,
) -> pendulum.DateTime:
    """Return the instant at hour:minute of date (shifted by days) in tz."""
    shifted = date.add(days=days)
    return pendulum.datetime(
        shifted.year, shifted.month, shifted.day, hour, minute, tz=tz
    )


def local_date(datetime: pendulum.DateTime, tz: TimezoneLike = "local") -> pendulum.Date:
    return datetime.in_tz(tz).date()


def is_same_day(
    datetime: pendulum.DateTime, date: pendulum.Date, tz: TimezoneLike = "local"
) -> bool:
    return local_date(datetime, tz) == date


def datetime_to_display_time_str(
    datetime: pendulum.DateTime, tz: TimezoneLike = "local"
) -> str:
    """12-hour clock with zero-padded hour and uppercase suffix, e.g. '09:05 AM'."""
    return datetime.in_tz(tz).format("hh:mm A")


def datetime_to_display_local_datetime_str(
    datetime: pendulum.DateTime, tz: TimezoneLike = "local"
) -> str:
    return datetime.in_tz(tz).format("MMM-DD ddd hh:mm A")


def duration_to_str(duration: pendulum.Duration) -> str:
    return f"{int(duration.total_hours())}:{duration.minutes:02d}"
