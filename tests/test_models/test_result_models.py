"""Tests for the input and result Pydantic models — construction, invariants, immutability."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from einvoice_checker.models.inputs import BusinessInputs
from einvoice_checker.models.results import (
    NOT_AVAILABLE,
    CategoryResult,
    ImplementationDetails,
    ResultBundle,
)
from einvoice_checker.taxonomy.category_taxonomy import ComplianceCategory, UrgencyLevel


class TestBusinessInputs:
    def test_wire_aliases(self):
        inputs = BusinessInputs.model_validate({
            "annualRevenue2024": "6000000",
            "annualRevenue2025": 0,
            "businessCommencementYear": "2025",
            "isPreBusiness": True,
        })
        assert inputs.revenue_2024 == 6_000_000.0
        assert inputs.revenue_2025 == 0.0
        assert inputs.commencement_year == 2025
        assert inputs.is_pre_business is True

    def test_raw_values_kept(self):
        inputs = BusinessInputs(annual_revenue_2024="abc")
        assert inputs.annual_revenue_2024 == "abc"
        assert inputs.revenue_2024 is None

    def test_defaults_absent(self):
        inputs = BusinessInputs()
        assert inputs.revenue_2024 is None
        assert inputs.revenue_2025 is None
        assert inputs.commencement_year is None
        assert inputs.is_pre_business is False

    def test_frozen(self):
        inputs = BusinessInputs()
        with pytest.raises(ValidationError):
            inputs.is_pre_business = True  # type: ignore[misc]


class TestCategoryResult:
    def test_valid_phase(self):
        result = CategoryResult(category=3, implementation_date="2026-07-01")
        assert result.category is ComplianceCategory.SMALL_BUSINESS
        assert result.message is None

    def test_valid_not_applicable(self):
        result = CategoryResult(category=0, message="Not required.")
        assert result.implementation_date is None

    def test_phase_without_date_rejected(self):
        with pytest.raises(ValidationError, match="requires an implementation_date"):
            CategoryResult(category=1)

    def test_phase_with_message_rejected(self):
        with pytest.raises(ValidationError, match="must not carry a message"):
            CategoryResult(category=1, implementation_date="2025-07-01", message="x")

    def test_not_applicable_with_date_rejected(self):
        with pytest.raises(ValidationError, match="must not carry an implementation_date"):
            CategoryResult(category=0, implementation_date="2025-07-01", message="x")

    def test_not_applicable_without_message_rejected(self):
        with pytest.raises(ValidationError, match="requires a non-empty message"):
            CategoryResult(category=0)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            CategoryResult(category=7, implementation_date="2025-07-01")


class TestImplementationDetails:
    def test_defaults_not_available(self):
        details = ImplementationDetails()
        assert details.implementation_date == NOT_AVAILABLE
        assert details.days_until == NOT_AVAILABLE
        assert details.is_overdue is False
        assert details.urgency_level == UrgencyLevel.LOW

    def test_negative_days_rejected(self):
        with pytest.raises(ValidationError, match="days_until"):
            ImplementationDetails(days_until=-1)

    def test_zero_days_allowed(self):
        assert ImplementationDetails(days_until=0).days_until == 0

    def test_other_strings_rejected(self):
        with pytest.raises(ValidationError):
            ImplementationDetails(days_until="soon")


class TestResultBundle:
    def test_requires_category_and_actions(self):
        with pytest.raises(ValidationError):
            ResultBundle()  # type: ignore[call-arg]

    def test_frozen(self):
        bundle = ResultBundle(category="Not Applicable", action_items=["x"])
        with pytest.raises(ValidationError):
            bundle.category = "Large"  # type: ignore[misc]
