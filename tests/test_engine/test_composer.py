"""
Tests for einvoice_checker/engine/composer.py.

What we test
------------
generate_results_content():
  - Category 0 yields the "Not Applicable" bundle with a single action.
  - Categories 1-6 take their label from the fixed table and copy the
    deadline fields from ImplementationDetails.

generate_action_items():
  - Overdue prepends the URGENT notice (5 items).
  - High / medium urgency prefix the first base item (4 items).
  - Low urgency, and "overdue" urgency without the overdue flag, return
    the base list unchanged.
  - Rules applied in priority order (overdue flag before urgency).
"""

from __future__ import annotations

import pytest

from einvoice_checker.engine.composer import (
    BASE_ACTIONS,
    HIGH_URGENCY_PREFIX,
    MEDIUM_URGENCY_PREFIX,
    NO_ACTION_REQUIRED,
    OVERDUE_NOTICE,
    generate_action_items,
    generate_results_content,
)
from einvoice_checker.engine.deadline import calculate_implementation_details
from einvoice_checker.models.results import CategoryResult, ImplementationDetails
from einvoice_checker.taxonomy.category_taxonomy import (
    CATEGORY_LABELS,
    ComplianceCategory,
    UrgencyLevel,
)


def _details(urgency: UrgencyLevel, is_overdue: bool = False) -> ImplementationDetails:
    return ImplementationDetails(
        implementation_date="March 1, 2024",
        days_until=60,
        is_overdue=is_overdue,
        urgency_level=urgency,
    )


class TestGenerateResultsContent:
    def test_category_1(self, large_category_result):
        details = calculate_implementation_details(large_category_result, 2024)
        bundle = generate_results_content(large_category_result, details)
        assert "Large Business" in bundle.category
        assert bundle.implementation_date == "July 1, 2025"
        assert bundle.days_until == 547
        assert bundle.urgency_level == UrgencyLevel.LOW
        assert bundle.is_overdue is False
        assert bundle.message is None
        assert bundle.action_items == list(BASE_ACTIONS)

    def test_category_0(self):
        result = CategoryResult(category=0, message="Not applicable test message")
        details = calculate_implementation_details(result, 2024)
        bundle = generate_results_content(result, details)
        assert bundle.category == "Not Applicable"
        assert bundle.message == "Not applicable test message"
        assert bundle.implementation_date == "N/A"
        assert bundle.days_until == "N/A"
        assert bundle.urgency_level == UrgencyLevel.LOW
        assert bundle.is_overdue is False
        assert bundle.action_items == [NO_ACTION_REQUIRED]

    def test_category_0_ignores_details(self, not_applicable_result):
        details = _details(UrgencyLevel.HIGH, is_overdue=True)
        bundle = generate_results_content(not_applicable_result, details)
        assert bundle.is_overdue is False
        assert bundle.action_items[0].startswith("No immediate action")

    @pytest.mark.parametrize("category", list(CATEGORY_LABELS))
    def test_labels_for_every_category(self, category):
        result = CategoryResult(category=category, implementation_date="2026-07-01")
        details = calculate_implementation_details(result, 2024)
        bundle = generate_results_content(result, details)
        assert bundle.category == CATEGORY_LABELS[category]

    def test_overdue_copied_from_details(self):
        result = CategoryResult(
            category=ComplianceCategory.LARGE_BUSINESS, implementation_date="2025-07-01"
        )
        details = calculate_implementation_details(result, 2026)
        bundle = generate_results_content(result, details)
        assert bundle.is_overdue is True
        assert bundle.days_until == 0
        assert bundle.urgency_level == UrgencyLevel.OVERDUE
        assert bundle.action_items[0] == OVERDUE_NOTICE


class TestGenerateActionItems:
    def test_overdue(self):
        actions = generate_action_items(_details(UrgencyLevel.OVERDUE, is_overdue=True))
        assert actions[0].startswith("URGENT: Implementation date has passed")
        assert actions[1:] == list(BASE_ACTIONS)

    def test_high(self):
        actions = generate_action_items(_details(UrgencyLevel.HIGH))
        assert actions[0].startswith("PRIORITY:")
        assert actions[0] == HIGH_URGENCY_PREFIX + BASE_ACTIONS[0]
        assert actions[1:] == list(BASE_ACTIONS[1:])

    def test_medium(self):
        actions = generate_action_items(_details(UrgencyLevel.MEDIUM))
        assert actions[0] == MEDIUM_URGENCY_PREFIX + BASE_ACTIONS[0]
        assert len(actions) == 4

    def test_low(self):
        assert generate_action_items(_details(UrgencyLevel.LOW)) == list(BASE_ACTIONS)

    def test_overdue_urgency_without_flag_returns_base(self):
        # Deadline exactly on the reference date
        actions = generate_action_items(_details(UrgencyLevel.OVERDUE, is_overdue=False))
        assert actions == list(BASE_ACTIONS)

    def test_overdue_flag_wins_over_urgency(self):
        actions = generate_action_items(_details(UrgencyLevel.HIGH, is_overdue=True))
        assert actions[0] == OVERDUE_NOTICE
        assert len(actions) == 5

    def test_returns_new_list(self):
        actions = generate_action_items(_details(UrgencyLevel.LOW))
        actions.append("extra")
        assert len(generate_action_items(_details(UrgencyLevel.LOW))) == 4
