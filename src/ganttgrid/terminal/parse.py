# SPDX-License-Identifier: MIT

import math
import re
from typing import Optional

import pendulum
import typer

from ganttgrid.time import local_datetime_from_str_to_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return local_datetime_from_str_to_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today().add(days=days_offset).start_of("day")
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today().start_of("day").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday().start_of("day").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow().start_of("day").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_hours(hours_param: Optional[str | float]) -> Optional[float]:
    """
    Parse an effort estimate in hours.

    Accepts a plain number of hours ("6", "1.5") or hours and minutes in
    (H)H:mm format ("1:30").
    """
    if hours_param is None:
        return None

    hours = str(hours_param).strip()

    time_match = re.match(r"^(\d{1,3}):([0-5]\d)$", hours)
    if time_match:
        value = int(time_match.group(1)) + int(time_match.group(2)) / 60
    else:
        try:
            value = float(hours)
        except ValueError:
            raise typer.BadParameter(
                f"Estimate must be hours like 6, 1.5 or 1:30, got '{hours}'"
            )

    if not math.isfinite(value):
        raise typer.BadParameter(
            f"Estimate must be a finite number of hours, got '{hours}'"
        )
    if value <= 0:
        raise typer.BadParameter("Estimate must be greater than zero")
    return value
