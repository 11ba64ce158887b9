"""Tests for einvoice_checker.utils.time_utils."""

from __future__ import annotations

from datetime import date

import pytest

from einvoice_checker.utils.time_utils import (
    current_calendar_year,
    days_until,
    format_long_date,
    parse_calendar_date,
    reference_date,
)


def test_reference_date_is_january_first() -> None:
    assert reference_date(2024) == date(2024, 1, 1)


def test_current_calendar_year() -> None:
    assert current_calendar_year() == date.today().year


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-07-01", date(2025, 7, 1)),
        ("2026-01-01", date(2026, 1, 1)),
        (" 2026-07-01 ", date(2026, 7, 1)),
    ],
)
def test_parse_calendar_date(value, expected) -> None:
    assert parse_calendar_date(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, "", "invalid-date", "2025-02-30", "NaN-01-01", "20250701", "2025-W27-2", "2025-7-1"],
)
def test_parse_calendar_date_invalid(value) -> None:
    assert parse_calendar_date(value) is None


def test_days_until_signed() -> None:
    ref = date(2024, 1, 1)
    assert days_until(ref, date(2024, 3, 1)) == 60
    assert days_until(ref, ref) == 0
    assert days_until(ref, date(2023, 12, 31)) == -1


def test_days_until_leap_year() -> None:
    assert days_until(date(2024, 1, 1), date(2025, 1, 1)) == 366


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2025, 7, 1), "July 1, 2025"),
        (date(2026, 1, 1), "January 1, 2026"),
        (date(2024, 12, 25), "December 25, 2024"),
    ],
)
def test_format_long_date(value, expected) -> None:
    assert format_long_date(value) == expected


@pytest.mark.parametrize("year", [0, 10_000])
def test_reference_date_out_of_range(year) -> None:
    with pytest.raises(ValueError):
        reference_date(year)
