"""
Compliance category rules: maps ``BusinessInputs`` to a ``CategoryResult``.

Rules (evaluated top to bottom within a branch — first match wins)
-------------------------------------------------------------------
Pre-business (classified by projected revenue ``rev2025``):
    4 : year <  2026 and rev2025 >= 500k       -> 2026-07-01
    5 : year >= 2026 and rev2025 >= 500k       -> {year}-07-01
    6 : rev2025 < 500k                         -> {year + 1}-01-01

Established business (classified by actual revenue ``rev2024``):
    1 : 5M   <  rev2024 <= 25M                 -> 2025-07-01
    2 : 1M   <  rev2024 <= 5M                  -> 2026-01-01
    3 : 500k <= rev2024 <= 1M                  -> 2026-07-01
    0 : rev2024 absent or < 500k               -> not required

Anything else (e.g. rev2024 above 25M, or a pre-business with no
projected revenue) gets the indeterminate category 0 result.

Absent values
-------------
Revenues and years are read through the ``BusinessInputs`` accessors, which
return ``None`` for unparsable input.  Every comparison against ``None`` is
false, so absent inputs fall through to the defaults above.  Category 6
additionally needs a known commencement year to build its date.
"""

from __future__ import annotations

import logging
from typing import Optional

from einvoice_checker.models.inputs import BusinessInputs
from einvoice_checker.models.results import CategoryResult
from einvoice_checker.taxonomy.category_taxonomy import ComplianceCategory
from einvoice_checker.taxonomy.outcome_taxonomy import ErrorKind

logger = logging.getLogger(__name__)

REVENUE_THRESHOLD = 500_000
MEDIUM_THRESHOLD = 1_000_000
LARGE_THRESHOLD = 5_000_000
LARGE_CEILING = 25_000_000
NEW_BUSINESS_YEAR = 2026

NOT_REQUIRED_MESSAGE = (
    "E-invoice not required based on current revenue (below RM500k) "
    "or information provided."
)
INDETERMINATE_MESSAGE = (
    "E-invoice requirements cannot be determined with the provided information."
)


def determine_category(inputs: BusinessInputs) -> CategoryResult:
    """Classify a business into its e-invoice compliance category.

    Pure and total: every input produces a result; nothing raises.

    Args:
        inputs: Declared business data.

    Returns:
        ``CategoryResult`` with the category and ISO implementation date,
        or category 0 with an explanatory message.
    """
    if inputs.is_pre_business:
        result = _classify_pre_business(inputs.revenue_2025, inputs.commencement_year)
    else:
        result = _classify_established(inputs.revenue_2024)

    if result is None:
        logger.warning(
            "No category rule matched; returning indeterminate result",
            extra={"error_kind": ErrorKind.INDETERMINATE_CATEGORY.value},
        )
        return CategoryResult(
            category=ComplianceCategory.NOT_APPLICABLE,
            message=INDETERMINATE_MESSAGE,
        )

    logger.debug(
        "Classified business as category %d (date=%s)",
        result.category, result.implementation_date,
    )
    return result


def _classify_pre_business(
    revenue: Optional[float],
    year: Optional[int],
) -> Optional[CategoryResult]:
    if revenue is None:
        return None

    if year is not None and year < NEW_BUSINESS_YEAR and revenue >= REVENUE_THRESHOLD:
        return CategoryResult(
            category=ComplianceCategory.PRE_COMMENCEMENT,
            implementation_date=f"{NEW_BUSINESS_YEAR}-07-01",
        )
    if year is not None and year >= NEW_BUSINESS_YEAR and revenue >= REVENUE_THRESHOLD:
        return CategoryResult(
            category=ComplianceCategory.NEW_BUSINESS,
            implementation_date=f"{year}-07-01",
        )
    # Category 6 builds its date from the year, so an absent year falls through
    if year is not None and revenue < REVENUE_THRESHOLD:
        return CategoryResult(
            category=ComplianceCategory.NEW_SMALL_BUSINESS,
            implementation_date=f"{year + 1}-01-01",
        )
    return None


def _classify_established(revenue: Optional[float]) -> Optional[CategoryResult]:
    if revenue is None or revenue < REVENUE_THRESHOLD:
        return CategoryResult(
            category=ComplianceCategory.NOT_APPLICABLE,
            message=NOT_REQUIRED_MESSAGE,
        )

    if LARGE_THRESHOLD < revenue <= LARGE_CEILING:
        return CategoryResult(
            category=ComplianceCategory.LARGE_BUSINESS,
            implementation_date="2025-07-01",
        )
    if MEDIUM_THRESHOLD < revenue <= LARGE_THRESHOLD:
        return CategoryResult(
            category=ComplianceCategory.MEDIUM_BUSINESS,
            implementation_date="2026-01-01",
        )
    if REVENUE_THRESHOLD <= revenue <= MEDIUM_THRESHOLD:
        return CategoryResult(
            category=ComplianceCategory.SMALL_BUSINESS,
            implementation_date="2026-07-01",
        )
    return None
