"""Tests for einvoice_checker.reporting.formatters."""

from __future__ import annotations

from einvoice_checker.engine.composer import BASE_ACTIONS, NO_ACTION_REQUIRED
from einvoice_checker.models.results import ResultBundle
from einvoice_checker.reporting.formatters import format_field_errors, format_result_bundle
from einvoice_checker.taxonomy.category_taxonomy import CATEGORY_LABELS, UrgencyLevel


def _bundle(**overrides) -> ResultBundle:
    fields = dict(
        category=CATEGORY_LABELS[1],
        implementation_date="July 1, 2025",
        days_until=547,
        urgency_level=UrgencyLevel.LOW,
        is_overdue=False,
        action_items=list(BASE_ACTIONS),
    )
    fields.update(overrides)
    return ResultBundle(**fields)


# ── format_result_bundle ──────────────────────────────────────────────────────


def test_format_result_bundle_basic() -> None:
    output = format_result_bundle(_bundle())
    assert "=== Your E-Invoice Implementation Details ===" in output
    assert "Large Business" in output
    assert "Implementation Date: July 1, 2025" in output
    assert "547 (Urgency: Low)" in output
    assert "Recommended Actions:" in output
    assert "1. " + BASE_ACTIONS[0] in output
    assert "4. " + BASE_ACTIONS[3] in output
    assert "Status:" not in output


def test_format_result_bundle_overdue() -> None:
    output = format_result_bundle(
        _bundle(days_until=0, is_overdue=True, urgency_level=UrgencyLevel.OVERDUE)
    )
    assert "[OVERDUE] Implementation date has passed" in output
    assert "Days Until:" not in output


def test_format_result_bundle_not_applicable() -> None:
    bundle = ResultBundle(
        category="Not Applicable",
        message="E-invoice not required.",
        action_items=[NO_ACTION_REQUIRED],
    )
    output = format_result_bundle(bundle)
    assert "Status:              E-invoice not required." in output
    assert "Category:            Not Applicable" in output
    assert "Implementation Date:" not in output
    assert "Days Until:" not in output
    assert NO_ACTION_REQUIRED in output


def test_format_result_bundle_none() -> None:
    output = format_result_bundle(None)
    assert "Could not calculate results" in output
    assert "Recommended Actions" not in output


# ── format_field_errors ───────────────────────────────────────────────────────


def test_format_field_errors_skips_cleared() -> None:
    output = format_field_errors({
        "annualRevenue2024": "This field is required.",
        "annualRevenue2025": None,
        "email": "Invalid format.",
    })
    assert output.splitlines() == [
        "  annualRevenue2024: This field is required.",
        "  email: Invalid format.",
    ]


def test_format_field_errors_empty() -> None:
    assert format_field_errors({"email": None}) == ""
    assert format_field_errors({}) == ""
