"""
Per-field validation of raw questionnaire values.

Check order (first failure wins)
--------------------------------
    1. Required : null / "" / whitespace-only  -> "This field is required."
                  (optional fields that are empty pass immediately)
    2. Numeric  : unparsable                   -> "Please enter a valid number."
                  below ``min``                -> "Value must be {min} or more."
                  above ``max``                -> "Value must be {max} or less."
    3. Pattern  : whole value must match       -> "Invalid format."

Fields without a rule always pass and leave the error map untouched.

State threading
---------------
The caller owns the field-error map.  ``validate_input()`` never mutates the
map it is given; it returns an updated copy in which this field's previous
error has been replaced (``None`` on success).  ``validate_field()`` is the
pure single-field verdict underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from einvoice_checker.taxonomy.outcome_taxonomy import ErrorKind
from einvoice_checker.utils.number_utils import parse_float
from einvoice_checker.validation.rules import get_rule

FieldErrors = dict[str, Optional[str]]

REQUIRED_MESSAGE = "This field is required."
INVALID_NUMBER_MESSAGE = "Please enter a valid number."
INVALID_FORMAT_MESSAGE = "Invalid format."


@dataclass(frozen=True)
class FieldValidation:
    """Verdict for one field.

    Attributes:
        field:    Form field name.
        is_valid: ``True`` if every configured check passed.
        error:    User-facing error message, or ``None`` when valid.
        kind:     Failure classification, or ``None`` when valid.
        checked:  ``False`` when the field has no rule (nothing was checked).
    """

    field: str
    is_valid: bool
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    checked: bool = True


def is_blank(value: Any) -> bool:
    """Return ``True`` for ``None``, ``""``, or a whitespace-only string."""
    return value is None or str(value).strip() == ""


def validate_field(field_name: str, value: Any) -> FieldValidation:
    """Validate one raw value against its field's rule.

    Args:
        field_name: Form field name, e.g. ``"annualRevenue2024"``.
        value:      Raw value as entered (str, number, or ``None``).

    Returns:
        ``FieldValidation`` describing the first failing check, or a
        passing verdict.
    """
    rule = get_rule(field_name)
    if rule is None:
        return FieldValidation(field=field_name, is_valid=True, checked=False)

    if is_blank(value):
        if rule.required:
            return _fail(field_name, REQUIRED_MESSAGE, ErrorKind.REQUIRED_FIELD_MISSING)
        return FieldValidation(field=field_name, is_valid=True)

    if rule.type == "number":
        number = parse_float(value)
        if number is None:
            # Blank values never reach this point, so any parse failure is
            # reported whether or not the field is required.
            return _fail(field_name, INVALID_NUMBER_MESSAGE, ErrorKind.INVALID_NUMBER_FORMAT)
        if rule.min is not None and number < rule.min:
            return _fail(
                field_name,
                f"Value must be {_format_bound(rule.min)} or more.",
                ErrorKind.OUT_OF_RANGE_MIN,
            )
        if rule.max is not None and number > rule.max:
            return _fail(
                field_name,
                f"Value must be {_format_bound(rule.max)} or less.",
                ErrorKind.OUT_OF_RANGE_MAX,
            )

    if rule.pattern is not None and not rule.pattern.fullmatch(str(value)):
        return _fail(field_name, INVALID_FORMAT_MESSAGE, ErrorKind.PATTERN_MISMATCH)

    return FieldValidation(field=field_name, is_valid=True)


def validate_input(
    field_name: str,
    value: Any,
    errors: Optional[Mapping[str, Optional[str]]] = None,
) -> tuple[bool, FieldErrors]:
    """Validate one field and thread the result through an error map.

    Args:
        field_name: Form field name.
        value:      Raw value as entered.
        errors:     Current field-error map (not modified).

    Returns:
        ``(is_valid, updated_errors)``.  ``updated_errors`` is a new dict with
        ``field_name`` set to its error message, or ``None`` when valid.
        Unchecked fields are not added to the map.
    """
    updated: FieldErrors = dict(errors or {})
    verdict = validate_field(field_name, value)
    if verdict.checked:
        updated[field_name] = verdict.error
    return verdict.is_valid, updated


def validate_fields(
    values: Mapping[str, Any],
    field_names: Iterable[str],
    errors: Optional[Mapping[str, Optional[str]]] = None,
) -> tuple[bool, FieldErrors]:
    """Validate several fields in order, e.g. every field on one form step.

    Every field is checked even after a failure so all messages can be shown.

    Args:
        values:      Mapping of field name to raw value.
        field_names: Fields to validate, in display order.
        errors:      Current field-error map (not modified).

    Returns:
        ``(all_valid, updated_errors)``.
    """
    all_valid = True
    updated: FieldErrors = dict(errors or {})
    for name in field_names:
        is_valid, updated = validate_input(name, values.get(name), updated)
        all_valid = all_valid and is_valid
    return all_valid, updated


# ── Helpers ───────────────────────────────────────────────────────────────────

def _fail(field_name: str, message: str, kind: ErrorKind) -> FieldValidation:
    return FieldValidation(field=field_name, is_valid=False, error=message, kind=kind)


def _format_bound(bound: float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)
