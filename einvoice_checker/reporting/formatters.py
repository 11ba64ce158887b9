"""
ASCII terminal formatters for CLI output.

All formatters accept result models / error maps and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Result layout
-------------
::

  === Your E-Invoice Implementation Details ===
    Category:            Large Business (>RM5mil, ≤RM25mil annual revenue in 2024)
    Implementation Date: July 1, 2025
    Days Until:          547 (Urgency: Low)

    Recommended Actions:
      1. Familiarize yourself with ...

Overdue results replace the "Days Until" line with an ``[OVERDUE]`` line.
Category 0 results lead with a ``Status:`` line carrying the message.
"""

from __future__ import annotations

from typing import Mapping, Optional

from einvoice_checker.models.results import NOT_AVAILABLE, ResultBundle


def format_result_bundle(bundle: Optional[ResultBundle]) -> str:
    """Format an assessment result for the terminal.

    Args:
        bundle: Composer output, or ``None`` if no result is available.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Your E-Invoice Implementation Details ===")

    if bundle is None:
        lines.append(
            "  Could not calculate results. "
            "Please ensure all previous steps are completed correctly."
        )
        return "\n".join(lines)

    if bundle.message:
        lines.append(f"  Status:              {bundle.message}")
    lines.append(f"  Category:            {bundle.category or NOT_AVAILABLE}")

    if bundle.implementation_date and bundle.implementation_date != NOT_AVAILABLE:
        lines.append(f"  Implementation Date: {bundle.implementation_date}")

    if bundle.days_until != NOT_AVAILABLE:
        if bundle.is_overdue:
            lines.append("  [OVERDUE] Implementation date has passed")
        else:
            urgency = str(bundle.urgency_level).capitalize()
            lines.append(
                f"  Days Until:          {bundle.days_until} (Urgency: {urgency})"
            )

    if bundle.action_items:
        lines.append("")
        lines.append("  Recommended Actions:")
        for i, item in enumerate(bundle.action_items, start=1):
            lines.append(f"    {i}. {item}")

    return "\n".join(lines)


def format_field_errors(errors: Mapping[str, Optional[str]]) -> str:
    """Format the failing entries of a field-error map, one per line.

    Fields whose error is ``None`` are skipped.  Returns an empty string
    when nothing failed.
    """
    lines = [
        f"  {name}: {message}"
        for name, message in errors.items()
        if message
    ]
    return "\n".join(lines)
