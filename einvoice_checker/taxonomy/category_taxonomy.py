"""
Compliance category taxonomy for the e-invoice rollout.

Two dimensions describe every assessment outcome:
  - ``ComplianceCategory`` — the *which*: which rollout phase applies?
  - ``UrgencyLevel``       — the *how soon*: how close is the deadline?

``CATEGORY_LABELS`` is the canonical label table shown to the user.
Every category except ``NOT_APPLICABLE`` must have an entry; run
``tests/test_taxonomy/test_category_taxonomy.py`` to verify this contract.

Usage example::

    from einvoice_checker.taxonomy.category_taxonomy import (
        CATEGORY_LABELS, ComplianceCategory,
    )

    label = CATEGORY_LABELS[ComplianceCategory.LARGE_BUSINESS]

This module has NO imports from any other ``einvoice_checker`` package.
"""

from enum import IntEnum, StrEnum
from types import MappingProxyType
from typing import Mapping


class ComplianceCategory(IntEnum):
    """Rollout phase a business falls into.

    Values are the integer category numbers used by the questionnaire.
    """

    NOT_APPLICABLE = 0
    """Not required, or the inputs did not match any phase."""

    # ── Established businesses (classified by 2024 revenue) ───────────────────
    LARGE_BUSINESS = 1
    """More than RM5mil and at most RM25mil revenue in 2024."""

    MEDIUM_BUSINESS = 2
    """More than RM1mil and at most RM5mil revenue in 2024."""

    SMALL_BUSINESS = 3
    """RM500k to RM1mil revenue in 2024."""

    # ── Pre-business (classified by projected first-year revenue) ─────────────
    PRE_COMMENCEMENT = 4
    """Commencing before 2026 with at least RM500k projected revenue."""

    NEW_BUSINESS = 5
    """Commencing 2026 or later with at least RM500k projected revenue."""

    NEW_SMALL_BUSINESS = 6
    """Any commencement year with under RM500k projected revenue."""


class UrgencyLevel(StrEnum):
    """How close the implementation deadline is to the reference date."""

    LOW = "low"
    """More than 180 days away, or no deadline applies."""

    MEDIUM = "medium"
    """Within the next 6 months (91-180 days)."""

    HIGH = "high"
    """Within the next 90 days."""

    OVERDUE = "overdue"
    """Deadline is today or has already passed."""


NOT_APPLICABLE_LABEL = "Not Applicable"
UNKNOWN_CATEGORY_LABEL = "Unknown Category"

CATEGORY_LABELS: Mapping[ComplianceCategory, str] = MappingProxyType({
    ComplianceCategory.LARGE_BUSINESS:
        "Large Business (>RM5mil, ≤RM25mil annual revenue in 2024)",
    ComplianceCategory.MEDIUM_BUSINESS:
        "Medium Business (>RM1mil, ≤RM5mil annual revenue in 2024)",
    ComplianceCategory.SMALL_BUSINESS:
        "Small Business (RM500k-RM1mil annual revenue in 2024)",
    ComplianceCategory.PRE_COMMENCEMENT:
        "Pre-commencement Business (commencing before 2026, ≥RM500k projected first year revenue)",
    ComplianceCategory.NEW_BUSINESS:
        "New Business (commencing 2026+, ≥RM500k projected first year revenue)",
    ComplianceCategory.NEW_SMALL_BUSINESS:
        "New Business (any commencement, <RM500k projected first year revenue)",
})
