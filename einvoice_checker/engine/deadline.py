"""
Deadline calculation: converts a ``CategoryResult`` into display-ready
``ImplementationDetails`` relative to a reference year.

The reference "today" is January 1 of ``current_year``.  Day counts are
whole calendar days between two dates.

Urgency tiers (on the signed day count, priority order)
-------------------------------------------------------
    1. OVERDUE : days <= 0
    2. HIGH    : days <= 90
    3. MEDIUM  : days <= 180
    4. LOW     : everything else

A deadline falling exactly on the reference date is therefore "overdue"
in urgency but not flagged ``is_overdue`` (that needs a negative count).
Reported ``days_until`` is floored at 0.
"""

from __future__ import annotations

import logging
from typing import Optional

from einvoice_checker.models.results import (
    NOT_AVAILABLE,
    CategoryResult,
    ImplementationDetails,
)
from einvoice_checker.taxonomy.category_taxonomy import UrgencyLevel
from einvoice_checker.taxonomy.outcome_taxonomy import ErrorKind
from einvoice_checker.utils.time_utils import (
    current_calendar_year,
    days_until,
    format_long_date,
    parse_calendar_date,
    reference_date,
)

logger = logging.getLogger(__name__)

HIGH_URGENCY_DAYS = 90
MEDIUM_URGENCY_DAYS = 180

NOT_APPLICABLE_MESSAGE = "Implementation details not applicable."
INVALID_DATE_MESSAGE = "Invalid implementation date configured."
INVALID_YEAR_MESSAGE = "Invalid current year provided."


def calculate_implementation_details(
    category_result: CategoryResult,
    current_year: Optional[int] = None,
) -> ImplementationDetails:
    """Compute the display date, day count, overdue flag and urgency.

    Args:
        category_result: Classifier output.
        current_year:    Reference year; January 1 of it is "today".
                         ``None`` or 0 means the current calendar year.

    Returns:
        ``ImplementationDetails``.  Results without a date, with an
        unparsable one, or with a reference year outside 1..9999 come back
        with ``"N/A"`` fields and a message.  Never raises.
    """
    if not category_result.implementation_date:
        return _not_available(category_result.message or NOT_APPLICABLE_MESSAGE)

    target = parse_calendar_date(category_result.implementation_date)
    if target is None:
        logger.warning(
            "Invalid implementation date: %r",
            category_result.implementation_date,
            extra={"error_kind": ErrorKind.UNPARSABLE_DATE.value},
        )
        return _not_available(INVALID_DATE_MESSAGE)

    # 0 means "not chosen", like an empty year dropdown
    year = current_year or current_calendar_year()
    try:
        today = reference_date(year)
    except ValueError:
        logger.warning(
            "Invalid reference year: %r",
            year,
            extra={"error_kind": ErrorKind.UNPARSABLE_DATE.value},
        )
        return _not_available(INVALID_YEAR_MESSAGE)

    raw_days = days_until(today, target)

    return ImplementationDetails(
        implementation_date=format_long_date(target),
        days_until=max(raw_days, 0),
        is_overdue=raw_days < 0,
        urgency_level=classify_urgency(raw_days),
    )


def classify_urgency(raw_days: int) -> UrgencyLevel:
    """Map a signed day count to an urgency tier (see module docstring)."""
    if raw_days <= 0:
        return UrgencyLevel.OVERDUE
    if raw_days <= HIGH_URGENCY_DAYS:
        return UrgencyLevel.HIGH
    if raw_days <= MEDIUM_URGENCY_DAYS:
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW


def _not_available(message: str) -> ImplementationDetails:
    return ImplementationDetails(
        message=message,
        implementation_date=NOT_AVAILABLE,
        days_until=NOT_AVAILABLE,
        is_overdue=False,
        urgency_level=UrgencyLevel.LOW,
    )
