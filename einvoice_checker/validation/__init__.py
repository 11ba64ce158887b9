"""
Field validation for questionnaire inputs.

Modules
-------
rules     : ValidationRule model + the read-only VALIDATION_RULES table.
validator : FieldValidation dataclass + validate_field() + validate_input()
            + validate_fields() — pure functions; callers own the error map.
"""
