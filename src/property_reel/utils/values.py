"""Coercion and rounding helpers shared by the pipeline stages."""

import math
from typing import Any, Optional


def round_ms(value: float) -> float:
    """Round to millisecond precision, halves away from -inf.

    Values too large to scale are returned unchanged.
    """
    scaled = value * 1000 + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / 1000


def to_number(value: Any) -> Optional[float]:
    """Coerce a number or numeric string to a finite float.

    Returns None for anything else, including booleans, NaN and infinities.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def trim_url(value: Any) -> Any:
    """Strip whitespace and trailing commas from string URLs; other values pass through."""
    if not isinstance(value, str):
        return value
    return value.strip().rstrip(",")
