"""
Questionnaire flow controller: the four-step form as a pure state machine.

Steps
-----
    1. Annual Revenue               — annualRevenue2024, annualRevenue2025
    2. Business Information         — businessCommencementYear, currentYear
                                      (isPreBusiness is a checkbox; never invalid)
    3. Your E-Invoice Requirements  — results of the assessment
    4. Stay Updated                 — newsletter signup (email required)

Leaving step 2 with valid inputs runs the assessment and stores the
``ResultBundle`` on the state.  The newsletter signup is only logged; it is
never persisted or sent anywhere.

State threading
---------------
``QuestionnaireState`` is frozen.  Every operation takes a state and
returns a new one (wrapped in a ``StepOutcome`` where the caller also
needs a verdict); the caller decides which state to keep.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from einvoice_checker.config import QuestionnaireConfig
from einvoice_checker.engine.assessment import run_assessment
from einvoice_checker.models.inputs import BusinessInputs, RawValue
from einvoice_checker.models.results import ResultBundle
from einvoice_checker.utils.number_utils import parse_float, parse_int
from einvoice_checker.validation.rules import (
    ANNUAL_REVENUE_2024,
    ANNUAL_REVENUE_2025,
    BUSINESS_COMMENCEMENT_YEAR,
    CURRENT_YEAR,
    EMAIL,
    VALIDATION_RULES,
)
from einvoice_checker.validation.validator import (
    FieldErrors,
    FieldValidation,
    validate_field,
    validate_fields,
    validate_input,
)

logger = logging.getLogger(__name__)


class QuestionStep(IntEnum):
    """Form steps in display order."""

    REVENUE = 1
    BUSINESS_INFO = 2
    RESULTS = 3
    NEWSLETTER = 4


STEP_TITLES: Mapping[QuestionStep, str] = MappingProxyType({
    QuestionStep.REVENUE: "Annual Revenue",
    QuestionStep.BUSINESS_INFO: "Business Information",
    QuestionStep.RESULTS: "Your E-Invoice Requirements",
    QuestionStep.NEWSLETTER: "Stay Updated",
})

STEP_FIELDS: Mapping[QuestionStep, tuple[str, ...]] = MappingProxyType({
    QuestionStep.REVENUE: (ANNUAL_REVENUE_2024, ANNUAL_REVENUE_2025),
    QuestionStep.BUSINESS_INFO: (BUSINESS_COMMENCEMENT_YEAR, CURRENT_YEAR),
})

# Typed inputs; the year fields are dropdowns and stay as strings.
NUMERIC_FIELDS = frozenset({ANNUAL_REVENUE_2024, ANNUAL_REVENUE_2025})

# Free-text newsletter inputs; a cleared value is stored as "".
TEXT_FIELDS = frozenset({EMAIL, "businessName", "phone"})


class FormData(BaseModel):
    """Everything the user has entered so far, keyed by form wire name.

    Attributes:
        annual_revenue_2024:        Actual 2024 revenue (float, raw string, or None).
        annual_revenue_2025:        Projected first-year revenue.
        business_commencement_year: Dropdown value, e.g. ``"2024"``.
        is_pre_business:            Checkbox: not yet commenced.
        current_year:               Dropdown value used as the reference year.
        email:                      Newsletter email.
        business_name:              Newsletter business name (optional).
        phone:                      Newsletter phone (optional).
        marketing_consent:          Newsletter marketing consent checkbox.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    annual_revenue_2024: RawValue = Field(default=None, alias="annualRevenue2024")
    annual_revenue_2025: RawValue = Field(default=None, alias="annualRevenue2025")
    business_commencement_year: RawValue = Field(
        default="2024", alias="businessCommencementYear"
    )
    is_pre_business: bool = Field(default=False, alias="isPreBusiness")
    current_year: RawValue = Field(default="2024", alias="currentYear")
    email: str = ""
    business_name: str = Field(default="", alias="businessName")
    phone: str = ""
    marketing_consent: bool = Field(default=False, alias="marketingConsent")

    def field_values(self) -> dict[str, Any]:
        """Return all values keyed by form wire name."""
        return self.model_dump(by_alias=True)

    def to_business_inputs(self) -> BusinessInputs:
        """Build the classifier input from the current answers."""
        return BusinessInputs(
            annual_revenue_2024=self.annual_revenue_2024,
            annual_revenue_2025=self.annual_revenue_2025,
            business_commencement_year=self.business_commencement_year,
            is_pre_business=self.is_pre_business,
        )

    def newsletter_payload(self) -> dict[str, Any]:
        """Return the newsletter signup fields."""
        return {
            "email": self.email,
            "businessName": self.business_name,
            "phone": self.phone,
            "marketingConsent": self.marketing_consent,
        }


class QuestionnaireState(BaseModel):
    """Snapshot of one questionnaire session.

    Attributes:
        current_step:         Step being shown.
        form_data:            Answers so far.
        results:              Result bundle once step 2 has been completed.
        errors:               Field-error map (field name → message or None).
        newsletter_submitted: ``True`` after a valid newsletter signup.
    """

    model_config = ConfigDict(frozen=True)

    current_step: QuestionStep = QuestionStep.REVENUE
    form_data: FormData = FormData()
    results: Optional[ResultBundle] = None
    errors: dict[str, Optional[str]] = {}
    newsletter_submitted: bool = False


@dataclass(frozen=True)
class StepOutcome:
    """Result of a navigation or submit action.

    Attributes:
        state:    The new state (errors populated on failure).
        is_valid: ``True`` if every field checked by the action passed.
        advanced: ``True`` if ``current_step`` changed.
    """

    state: QuestionnaireState
    is_valid: bool
    advanced: bool = False


# ── Session construction ──────────────────────────────────────────────────────

def new_questionnaire(config: Optional[QuestionnaireConfig] = None) -> QuestionnaireState:
    """Return a fresh state on step 1 with the configured dropdown defaults."""
    cfg = config or QuestionnaireConfig()
    form = FormData(
        business_commencement_year=str(cfg.default_commencement_year),
        current_year=str(cfg.default_current_year),
    )
    return QuestionnaireState(form_data=form)


def year_options(start: int, end: int) -> list[int]:
    """Return the inclusive list of years offered by a dropdown.

    Raises:
        ValueError: If ``end < start``.
    """
    if end < start:
        raise ValueError(f"end ({end}) must be >= start ({start}).")
    return list(range(start, end + 1))


def commencement_year_options(config: Optional[QuestionnaireConfig] = None) -> list[int]:
    cfg = config or QuestionnaireConfig()
    return year_options(cfg.commencement_year_start, cfg.commencement_year_end)


def current_year_options(config: Optional[QuestionnaireConfig] = None) -> list[int]:
    cfg = config or QuestionnaireConfig()
    return year_options(cfg.current_year_start, cfg.current_year_end)


# ── Field updates ─────────────────────────────────────────────────────────────

def coerce_field_value(raw: Any, is_number: bool) -> Any:
    """Convert a raw input value the way the form stores it.

    Numeric inputs: blank → ``None``; parseable → float; anything else is
    kept as the raw string so the validator can report it.  Other inputs
    are returned unchanged.
    """
    if not is_number or isinstance(raw, bool):
        return raw
    if raw is None or (isinstance(raw, str) and raw == ""):
        return None
    number = parse_float(raw)
    return raw if number is None else number


def update_field(
    state: QuestionnaireState,
    field_name: str,
    raw: Any,
) -> tuple[QuestionnaireState, FieldValidation]:
    """Store one changed input and validate it.

    Args:
        state:      Current state.
        field_name: Form wire name, e.g. ``"annualRevenue2024"`` or ``"email"``.
        raw:        Value as entered.

    Returns:
        ``(new_state, verdict)``.  The field's entry in ``errors`` is
        replaced with the verdict's message (fields without a rule are
        stored but not added to ``errors``).

    Raises:
        KeyError: If ``field_name`` is not a form field.
    """
    attr = _FIELD_ATTRS.get(field_name)
    if attr is None:
        raise KeyError(
            f"Unknown form field '{field_name}'. "
            f"Available fields: {sorted(_FIELD_ATTRS)}"
        )

    value = coerce_field_value(raw, field_name in NUMERIC_FIELDS)
    if value is None and field_name in TEXT_FIELDS:
        value = ""
    form = FormData.model_validate(
        {**state.form_data.model_dump(), attr: value}
    )

    verdict = validate_field(field_name, value)
    errors = dict(state.errors)
    if verdict.checked:
        errors[field_name] = verdict.error

    return state.model_copy(update={"form_data": form, "errors": errors}), verdict


# ── Navigation ────────────────────────────────────────────────────────────────

def advance(state: QuestionnaireState) -> StepOutcome:
    """Validate the current step and move to the next one.

    All errors are cleared first.  Leaving step 2 runs the assessment.
    On the last step the state stays put (``advanced`` is ``False``).
    """
    step = state.current_step
    is_valid, errors = validate_fields(
        state.form_data.field_values(),
        STEP_FIELDS.get(step, ()),
        cleared_errors(),
    )
    if not is_valid:
        logger.debug("Step %d failed validation: %s", step, _failing(errors))
        return StepOutcome(
            state=state.model_copy(update={"errors": errors}),
            is_valid=False,
        )

    results = state.results
    if step == QuestionStep.BUSINESS_INFO:
        assessment = run_assessment(
            state.form_data.to_business_inputs(),
            current_year=parse_int(state.form_data.current_year),
        )
        results = assessment.bundle

    next_step = QuestionStep(step + 1) if step < QuestionStep.NEWSLETTER else step
    new_state = state.model_copy(update={
        "current_step": next_step,
        "results": results,
        "errors": errors,
    })
    return StepOutcome(state=new_state, is_valid=True, advanced=next_step != step)


def go_back(state: QuestionnaireState) -> QuestionnaireState:
    """Return to the previous step; step 1 is a no-op."""
    if state.current_step == QuestionStep.REVENUE:
        return state
    return state.model_copy(update={"current_step": QuestionStep(state.current_step - 1)})


def submit_newsletter(state: QuestionnaireState) -> StepOutcome:
    """Validate the newsletter email and record the signup.

    The signup is logged only; nothing is sent or stored.
    """
    is_valid, errors = validate_input(EMAIL, state.form_data.email, cleared_errors())
    if not is_valid:
        return StepOutcome(
            state=state.model_copy(update={"errors": errors}),
            is_valid=False,
        )

    logger.info(
        "Newsletter signup attempt",
        extra={"signup": state.form_data.newsletter_payload()},
    )
    return StepOutcome(
        state=state.model_copy(update={"errors": errors, "newsletter_submitted": True}),
        is_valid=True,
    )


# ── Display helpers ───────────────────────────────────────────────────────────

def progress_label(step: QuestionStep) -> str:
    """Return the progress indicator text, e.g. ``"Step 2 / 4"``."""
    return f"Step {int(step)} / {len(QuestionStep)}"


def next_label(step: QuestionStep) -> Optional[str]:
    """Return the forward button label, or ``None`` on the last step."""
    if step == QuestionStep.NEWSLETTER:
        return None
    if step == QuestionStep.RESULTS:
        return "Go to Newsletter"
    return "Next"


def cleared_errors() -> FieldErrors:
    """Return an error map with every validated field reset to ``None``."""
    return {name: None for name in VALIDATION_RULES}


def _failing(errors: Mapping[str, Optional[str]]) -> list[str]:
    return sorted(name for name, message in errors.items() if message)


_FIELD_ATTRS: Mapping[str, str] = MappingProxyType({
    (info.alias or name): name for name, info in FormData.model_fields.items()
})
