"""
Result composition: combines a ``CategoryResult`` and its
``ImplementationDetails`` into the ``ResultBundle`` shown to the user.

Action items (priority order — first match wins)
------------------------------------------------
    1. Overdue : URGENT notice prepended to the four base items
    2. High    : base item 1 prefixed with a PRIORITY notice
    3. Medium  : base item 1 prefixed with an ACTION notice
    4. Other   : the four base items unchanged
"""

from __future__ import annotations

from einvoice_checker.models.results import (
    NOT_AVAILABLE,
    CategoryResult,
    ImplementationDetails,
    ResultBundle,
)
from einvoice_checker.taxonomy.category_taxonomy import (
    CATEGORY_LABELS,
    NOT_APPLICABLE_LABEL,
    UNKNOWN_CATEGORY_LABEL,
    ComplianceCategory,
    UrgencyLevel,
)

BASE_ACTIONS: tuple[str, ...] = (
    "Familiarize yourself with the e-Invoice guidelines on the MyInvois portal.",
    "Assess your current accounting system's compatibility for API integration.",
    "Plan for staff training on new e-invoice procedures.",
    "Prepare for testing e-invoice generation and submission.",
)

NO_ACTION_REQUIRED = "No immediate action required based on current information."
OVERDUE_NOTICE = (
    "URGENT: Implementation date has passed. Please check requirements immediately."
)
HIGH_URGENCY_PREFIX = "PRIORITY: Your implementation date is approaching soon. "
MEDIUM_URGENCY_PREFIX = "ACTION: Your implementation date is within the next 6 months. "


def generate_results_content(
    category_result: CategoryResult,
    details: ImplementationDetails,
) -> ResultBundle:
    """Build the user-facing result bundle.

    Args:
        category_result: Classifier output.
        details:         Deadline calculator output for the same result.

    Returns:
        ``ResultBundle``.  Category 0 always yields the "Not Applicable"
        bundle regardless of ``details``.
    """
    if category_result.category == ComplianceCategory.NOT_APPLICABLE:
        return ResultBundle(
            category=NOT_APPLICABLE_LABEL,
            message=category_result.message,
            implementation_date=NOT_AVAILABLE,
            days_until=NOT_AVAILABLE,
            urgency_level=UrgencyLevel.LOW,
            is_overdue=False,
            action_items=[NO_ACTION_REQUIRED],
        )

    return ResultBundle(
        category=CATEGORY_LABELS.get(category_result.category, UNKNOWN_CATEGORY_LABEL),
        implementation_date=details.implementation_date,
        days_until=details.days_until,
        urgency_level=details.urgency_level,
        is_overdue=details.is_overdue,
        action_items=generate_action_items(details),
    )


def generate_action_items(details: ImplementationDetails) -> list[str]:
    """Return the prioritised action list for a deadline.

    Args:
        details: Deadline facts; only ``is_overdue`` and ``urgency_level``
                 are read.

    Returns:
        New list of action strings (see module docstring for the rules).
    """
    if details.is_overdue:
        return [OVERDUE_NOTICE, *BASE_ACTIONS]
    if details.urgency_level == UrgencyLevel.HIGH:
        return [HIGH_URGENCY_PREFIX + BASE_ACTIONS[0], *BASE_ACTIONS[1:]]
    if details.urgency_level == UrgencyLevel.MEDIUM:
        return [MEDIUM_URGENCY_PREFIX + BASE_ACTIONS[0], *BASE_ACTIONS[1:]]
    return list(BASE_ACTIONS)
