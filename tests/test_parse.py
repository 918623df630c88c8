# SPDX-License-Identifier: MIT

import pendulum
import pytest
import typer

from ganttgrid.terminal.parse import parse_datetime, parse_hours


@pytest.mark.parametrize(
    "value, expected",
    [("6", 6.0), ("1.5", 1.5), ("1:30", 1.5), ("0:45", 0.75), ("40", 40.0)],
)
def test_parse_hours(value, expected):
    assert parse_hours(value) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value", ["abc", "0", "-2", "1:75", "nan", "inf", "-inf", "Infinity"]
)
def test_parse_hours_rejects_bad_input(value):
    with pytest.raises(typer.BadParameter):
        parse_hours(value)


def test_parse_hours_none():
    assert parse_hours(None) is None


def test_parse_datetime_date_is_local_midnight():
    parsed = parse_datetime("2025-01-15")

    assert parsed is not None
    assert parsed.in_tz("local").format("YYYY-MM-DD HH:mm") == "2025-01-15 00:00"


def test_parse_datetime_day_offset():
    parsed = parse_datetime("2")

    assert parsed is not None
    assert parsed.in_tz("local").date() == pendulum.today().add(days=2).date()


def test_parse_datetime_rejects_garbage():
    with pytest.raises(typer.BadParameter):
        parse_datetime("whenever")
