"""
Static per-field validation rules for the questionnaire.

``VALIDATION_RULES`` is built once at import time and is read-only
(``MappingProxyType`` of frozen models).  Keys are the form's wire names.

  field                      required  type    min    max            pattern
  annualRevenue2024          yes       number  0      1,000,000,000  -
  annualRevenue2025          yes       number  0      1,000,000,000  -
  businessCommencementYear   yes       number  2020   2030           -
  currentYear                yes       number  2022   2026           -
  email                      yes       -       -      -              EMAIL_PATTERN
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, model_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationRule(BaseModel):
    """Validation constraints for one form field.

    Attributes:
        required: Empty values fail when ``True``; pass immediately otherwise.
        type:     ``"number"`` enables numeric parsing and range checks.
        min:      Inclusive lower bound for numeric fields.
        max:      Inclusive upper bound for numeric fields.
        pattern:  Regular expression a non-empty value must match.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    required: bool = False
    type: Optional[Literal["number"]] = None
    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[re.Pattern[str]] = None

    @model_validator(mode="after")
    def validate_bounds(self) -> "ValidationRule":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max}).")
        return self


# Form field names
ANNUAL_REVENUE_2024 = "annualRevenue2024"
ANNUAL_REVENUE_2025 = "annualRevenue2025"
BUSINESS_COMMENCEMENT_YEAR = "businessCommencementYear"
CURRENT_YEAR = "currentYear"
EMAIL = "email"

VALIDATION_RULES: Mapping[str, ValidationRule] = MappingProxyType({
    ANNUAL_REVENUE_2024: ValidationRule(
        required=True, type="number", min=0, max=1_000_000_000,
    ),
    ANNUAL_REVENUE_2025: ValidationRule(
        required=True, type="number", min=0, max=1_000_000_000,
    ),
    BUSINESS_COMMENCEMENT_YEAR: ValidationRule(
        required=True, type="number", min=2020, max=2030,
    ),
    CURRENT_YEAR: ValidationRule(
        required=True, type="number", min=2022, max=2026,
    ),
    EMAIL: ValidationRule(required=True, pattern=EMAIL_PATTERN),
})


def get_rule(field_name: str) -> Optional[ValidationRule]:
    """Return the rule for ``field_name``, or ``None`` if the field is unchecked."""
    return VALIDATION_RULES.get(field_name)
