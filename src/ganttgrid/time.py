# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local(tz: str = "local") -> pendulum.Date:
    """The current calendar date as seen in `tz`."""
    return pendulum.today(tz).date()


def datetime_to_iso_str(value: pendulum.DateTime) -> str:
    return value.isoformat()


def datetime_to_iso_str_optional(value: Optional[pendulum.DateTime]) -> Optional[str]:
    return None if value is None else datetime_to_iso_str(value)


def datetime_to_display_local_date_str_optional(
    value: Optional[pendulum.DateTime],
) -> Optional[str]:
    if value is None:
        return None
    return value.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_from_str(value: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(value))


def datetime_from_str_optional(value: Optional[str]) -> Optional[pendulum.DateTime]:
    return None if value is None else datetime_from_str(value)


def local_datetime_from_str_to_utc(value: str) -> pendulum.DateTime:
    """Read a wall-clock date(-time) typed by the user as local time."""
    parsed = cast(pendulum.DateTime, pendulum.parse(value, tz="local"))
    return parsed.in_tz("UTC")


def whole_days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """
    Count the full calendar days from start to end, truncated toward zero.

    Wall-clock times are compared in start's timezone, so a span that crosses
    a DST change still counts as whole days.
    """
    end = end.in_tz(start.timezone)
    days = end.date().toordinal() - start.date().toordinal()
    if days > 0 and end.time() < start.time():
        days -= 1
    elif days < 0 and end.time() > start.time():
        days += 1
    return days
