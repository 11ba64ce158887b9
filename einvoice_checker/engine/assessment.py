"""
End-to-end assessment: classifier -> deadline calculator -> composer.

``run_assessment()`` is what the questionnaire flow and the CLI call once
all inputs have passed validation.  It keeps every intermediate result so
callers can show or export any stage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from einvoice_checker.engine.classifier import determine_category
from einvoice_checker.engine.composer import generate_results_content
from einvoice_checker.engine.deadline import calculate_implementation_details
from einvoice_checker.models.inputs import BusinessInputs
from einvoice_checker.models.results import (
    CategoryResult,
    ImplementationDetails,
    ResultBundle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assessment:
    """All three stage outputs for one set of inputs.

    Attributes:
        category_result: Classifier output.
        details:         Deadline calculator output.
        bundle:          Composer output (what gets rendered).
    """

    category_result: CategoryResult
    details: ImplementationDetails
    bundle: ResultBundle


def run_assessment(
    inputs: BusinessInputs,
    current_year: Optional[int] = None,
) -> Assessment:
    """Classify ``inputs`` and build the result bundle.

    Args:
        inputs:       Declared business data.
        current_year: Reference year passed to the deadline calculator.

    Returns:
        ``Assessment`` with every stage's output.
    """
    category_result = determine_category(inputs)
    details = calculate_implementation_details(category_result, current_year)
    bundle = generate_results_content(category_result, details)

    logger.info(
        "Assessment complete: category=%d urgency=%s overdue=%s",
        category_result.category, bundle.urgency_level, bundle.is_overdue,
    )
    return Assessment(category_result=category_result, details=details, bundle=bundle)
