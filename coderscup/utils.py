"""
Utility functions
"""
import math
import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_score(value: Any) -> int:
    """
    Coerce a raw score to a non-negative integer

    Parsing reads the leading integer and ignores whatever follows it.
    Anything without a leading integer becomes 0, and negative values
    clamp to 0.

    Args:
        value: Raw score (usually a string from the data file)

    Returns:
        Integer score >= 0

    Example:
        >>> coerce_score("875")
        875
        >>> coerce_score(" 12pts")
        12
        >>> coerce_score("n/a")
        0
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else 0

    match = _LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        return 0
    return max(int(match.group(1)), 0)
