"""
Numeric helpers for JSON-decoded parameter values.
"""
import math
from typing import Optional


def as_float(value) -> float:
    """
    Convert a JSON number to float.
    Integers too large for a double saturate to +/-inf instead of raising.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def clamp_if_bounds(
    value: float,
    min: Optional[float] = None,
    max: Optional[float] = None,
) -> float:
    """
    Clamp value to [min, max] when bounds are not None.
    Min is checked first, then max; if both are None, returns value unchanged.
    """
    v = as_float(value)
    if min is not None and v < min:
        v = float(min)
    if max is not None and v > max:
        v = float(max)
    return v
