"""
Export helpers for assessment results.

``export_to_json()`` writes to disk and returns the written ``Path``.
``assessment_to_record()`` is the adapter that flattens an ``Assessment``
into one JSON-ready dict: the result bundle plus the raw category number,
ISO deadline and the reference year it was computed against.
``save_assessment_record()`` files such a record in the results directory.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from einvoice_checker.engine.assessment import Assessment


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, default=str, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def assessment_to_record(
    assessment: Assessment,
    current_year: Optional[int] = None,
) -> dict[str, Any]:
    """Flatten an ``Assessment`` into a JSON-serialisable dict.

    Keys use the same camelCase names as the questionnaire form.

    Args:
        assessment:   Output of ``run_assessment()``.
        current_year: Reference year used for the deadline (informational).

    Returns:
        Dict with ``categoryNumber``, ``isoImplementationDate``,
        ``currentYear`` and every ``ResultBundle`` field.
    """
    bundle = assessment.bundle
    return {
        "categoryNumber": int(assessment.category_result.category),
        "isoImplementationDate": assessment.category_result.implementation_date,
        "currentYear": current_year,
        "category": bundle.category,
        "message": bundle.message,
        "implementationDate": bundle.implementation_date,
        "daysUntil": bundle.days_until,
        "urgencyLevel": str(bundle.urgency_level),
        "isOverdue": bundle.is_overdue,
        "actionItems": list(bundle.action_items),
    }


def save_assessment_record(record: dict[str, Any], out_dir: Path) -> Path:
    """Write an assessment record into ``out_dir`` under a timestamped name.

    File name: ``assessment_cat{N}_{YYYYmmdd_HHMMSS}.json`` (UTC).

    Args:
        record:  Output of ``assessment_to_record()``.
        out_dir: Results directory (created if missing).

    Returns:
        Path of the written file.
    """
    ts = datetime.now(tz=timezone.utc).strftime("%Y%m%d_%H%M%S")
    out = out_dir / f"assessment_cat{record['categoryNumber']}_{ts}.json"
    return export_to_json(record, out)
