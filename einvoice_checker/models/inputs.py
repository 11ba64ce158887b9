"""
Questionnaire input model.

``BusinessInputs`` is rebuilt from the form state every time classification
runs.  It keeps the values exactly as the user entered them (strings,
numbers, or ``None``) and exposes parsed accessors that return ``None`` for
anything unparsable.  The classifier only ever reads the parsed accessors.

Field aliases match the form's wire names (``annualRevenue2024`` etc.), so
form data can be passed straight to ``BusinessInputs.model_validate()``.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from einvoice_checker.utils.number_utils import parse_float, parse_int

RawValue = Optional[Union[int, float, str]]


class BusinessInputs(BaseModel):
    """Declared revenue and commencement data for one business.

    Attributes:
        annual_revenue_2024: Actual 2024 revenue in RM (established businesses).
        annual_revenue_2025: Projected first-year revenue in RM (pre-business).
        business_commencement_year: Year operations commence(d).
        is_pre_business: ``True`` if the business has not commenced yet.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    annual_revenue_2024: RawValue = Field(default=None, alias="annualRevenue2024")
    annual_revenue_2025: RawValue = Field(default=None, alias="annualRevenue2025")
    business_commencement_year: RawValue = Field(
        default=None, alias="businessCommencementYear"
    )
    is_pre_business: bool = Field(default=False, alias="isPreBusiness")

    @property
    def revenue_2024(self) -> Optional[float]:
        """2024 revenue as a float, or ``None`` if absent or unparsable."""
        return parse_float(self.annual_revenue_2024)

    @property
    def revenue_2025(self) -> Optional[float]:
        """Projected revenue as a float, or ``None`` if absent or unparsable."""
        return parse_float(self.annual_revenue_2025)

    @property
    def commencement_year(self) -> Optional[int]:
        """Commencement year as an int, or ``None`` if absent or unparsable."""
        return parse_int(self.business_commencement_year)
