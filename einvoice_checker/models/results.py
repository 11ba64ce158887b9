"""
Assessment output models.

Three models flow through the engine, one per stage:

  CategoryResult        — classifier output: category + ISO deadline
  ImplementationDetails — deadline calculator output: display date,
                          days remaining, overdue flag, urgency
  ResultBundle          — composer output: everything the UI renders

All three are frozen.  ``"N/A"`` (``NOT_AVAILABLE``) stands in for the date
and day count whenever no deadline applies.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from einvoice_checker.taxonomy.category_taxonomy import ComplianceCategory, UrgencyLevel

NOT_AVAILABLE = "N/A"

DaysUntil = Union[int, Literal["N/A"]]


class CategoryResult(BaseModel):
    """Classification of one business.

    Invariant: ``NOT_APPLICABLE`` always carries a message and no date;
    every other category carries a date and no message.

    Attributes:
        category: Assigned compliance category.
        implementation_date: ISO ``YYYY-MM-DD`` deadline, or ``None``.
        message: Explanation for ``NOT_APPLICABLE`` results.
    """

    model_config = ConfigDict(frozen=True)

    category: ComplianceCategory
    implementation_date: Optional[str] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def validate_category_shape(self) -> "CategoryResult":
        if self.category == ComplianceCategory.NOT_APPLICABLE:
            if self.implementation_date is not None:
                raise ValueError("Category 0 must not carry an implementation_date.")
            if not self.message:
                raise ValueError("Category 0 requires a non-empty message.")
        else:
            if not self.implementation_date:
                raise ValueError(
                    f"Category {int(self.category)} requires an implementation_date."
                )
            if self.message is not None:
                raise ValueError(
                    f"Category {int(self.category)} must not carry a message."
                )
        return self


class ImplementationDetails(BaseModel):
    """Deadline facts derived from a ``CategoryResult`` and a reference year.

    Attributes:
        implementation_date: Long display date (``"July 1, 2025"``) or ``"N/A"``.
        days_until: Whole days until the deadline, floored at 0, or ``"N/A"``.
        is_overdue: ``True`` if the deadline is before the reference date.
        urgency_level: Urgency tier.
        message: Explanation when no deadline could be computed.
    """

    model_config = ConfigDict(frozen=True)

    implementation_date: str = NOT_AVAILABLE
    days_until: DaysUntil = NOT_AVAILABLE
    is_overdue: bool = False
    urgency_level: UrgencyLevel = UrgencyLevel.LOW
    message: Optional[str] = None

    @field_validator("days_until")
    @classmethod
    def validate_days_non_negative(cls, v: DaysUntil) -> DaysUntil:
        if isinstance(v, int) and v < 0:
            raise ValueError(f"days_until must be >= 0, got {v}.")
        return v


class ResultBundle(BaseModel):
    """User-facing assessment result.

    Attributes:
        category: Category label, e.g. ``"Large Business (...)"``.
        message: Status message (category 0 only).
        implementation_date: Long display date or ``"N/A"``.
        days_until: Days until the deadline or ``"N/A"``.
        urgency_level: Urgency tier.
        is_overdue: Whether the deadline has passed.
        action_items: Ordered, prioritised action strings.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    message: Optional[str] = None
    implementation_date: str = NOT_AVAILABLE
    days_until: DaysUntil = NOT_AVAILABLE
    urgency_level: UrgencyLevel = UrgencyLevel.LOW
    is_overdue: bool = False
    action_items: list[str]
