"""
Lenient number parsing for raw form values.

Form fields arrive as whatever the user typed: strings, pre-parsed numbers,
or ``None``.  These helpers read the leading numeric part of a value the way
a browser form does (``"12abc"`` reads as 12, ``"2025.7"`` as year 2025) and
return ``None`` when nothing numeric is present.  Only ASCII digits count;
``"١٢"`` is not a number.

``None`` is the only "absent" marker; NaN never leaves this module, so
callers compare against ``None`` explicitly instead of relying on NaN
comparisons being false.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)
_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)


def parse_float(value: Any) -> Optional[float]:
    """Parse the leading floating-point number of ``value``.

    Args:
        value: Raw field value (str, int, float, or ``None``).

    Returns:
        The parsed float, or ``None`` if ``value`` is absent, a boolean,
        NaN, or has no numeric prefix.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number

    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if match is None:
        return None
    return float(match.group(0))


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value``.

    Floats are truncated toward zero; non-finite floats are absent.

    Args:
        value: Raw field value (str, int, float, or ``None``).

    Returns:
        The parsed integer, or ``None`` if nothing numeric is present.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None

    match = _INT_PREFIX.match(str(value).lstrip())
    if match is None:
        return None
    return int(match.group(0))
