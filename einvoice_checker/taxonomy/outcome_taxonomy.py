"""
Failure taxonomy for the questionnaire core.

Every failure path in the core is recoverable: validator failures become
inline field messages, and the engine degrades to a displayable result
instead of raising.  ``ErrorKind`` tags each of those paths so callers
and log processors can tell them apart without parsing message text.

This module has NO imports from any other ``einvoice_checker`` package.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kind of recoverable failure produced by the validator or the engine."""

    # ── Field validation ──────────────────────────────────────────────────────
    REQUIRED_FIELD_MISSING = "required_field_missing"
    """Required field is null, empty, or whitespace only."""

    INVALID_NUMBER_FORMAT = "invalid_number_format"
    """Numeric field could not be parsed as a number."""

    OUT_OF_RANGE_MIN = "out_of_range_min"
    """Numeric value is below the configured minimum."""

    OUT_OF_RANGE_MAX = "out_of_range_max"
    """Numeric value is above the configured maximum."""

    PATTERN_MISMATCH = "pattern_mismatch"
    """Value does not match the field's regular expression."""

    # ── Engine degradation ────────────────────────────────────────────────────
    UNPARSABLE_DATE = "unparsable_date"
    """Implementation date could not be read as a calendar date."""

    INDETERMINATE_CATEGORY = "indeterminate_category"
    """Inputs matched no classification rule."""
