"""
Calendar date utilities for deadline calculations.

Key concepts:
  - Reference date: the questionnaire asks for a "current year" and treats
    January 1 of that year as today.  All arithmetic is on calendar dates;
    there is no time-of-day or timezone component anywhere.
  - Implementation dates are stored as ISO ``YYYY-MM-DD`` strings and shown
    to users in long form, e.g. ``"July 1, 2025"``.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def reference_date(current_year: int) -> date:
    """Return January 1 of ``current_year``, the questionnaire's "today".

    Raises:
        ValueError: If ``current_year`` is outside 1..9999.
    """
    return date(current_year, 1, 1)


def current_calendar_year() -> int:
    """Return the calendar year of the local system date."""
    return date.today().year


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """Parse an ISO calendar date string, returning ``None`` on failure.

    Args:
        value: Date string such as ``"2025-07-01"``.

    Returns:
        The parsed ``date``, or ``None`` if ``value`` is empty, not in
        ``YYYY-MM-DD`` form (``"20250701"`` and week dates are rejected),
        or not a valid calendar date (e.g. ``"2025-02-30"``).
    """
    if not value:
        return None
    text = value.strip()
    if not _ISO_DATE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def days_until(check_date: date, target_date: date) -> int:
    """Return signed number of whole days from ``check_date`` to ``target_date``.

    Positive: target is in the future.
    Zero: target is the check date.
    Negative: target has already passed.
    """
    return (target_date - check_date).days


def format_long_date(value: date) -> str:
    """Format a date as month name, day and year, e.g. ``"July 1, 2025"``."""
    return f"{value:%B} {value.day}, {value.year}"
