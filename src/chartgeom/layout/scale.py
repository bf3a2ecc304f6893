"""
Scale math: value range, zero-line offset and value-to-pixel conversion.

Every height computed by the layout divides by ``scaler(values)``; the functions here
are the single source of that denominator.

Notes
- A collapsed range (flat or single-value data) is replaced by 1 so a flat series still
  renders at a fixed proportional height. The substitution is logged at DEBUG.
- height_for picks its anchor per sign regime: ``min`` for all-nonnegative data and
  ``max`` for all-nonpositive data (unless from_zero). Swapping the two inverts the
  shape of negative series.
- from_number is honored when it is not None (0 included).

Math mapping
- scaler = max(V ∪ A) - min(V ∪ A), A = {0} (from_zero), {n} (from_number) or {} (default)
- base_height = h (V >= 0), 0 (V <= 0), h * max(V) / scaler (mixed)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

__all__ = [
    "scaler",
    "range_anchor",
    "base_height",
    "height_for",
]

logger = logging.getLogger(__name__)


def _anchored(values: Sequence[float], from_zero: bool, from_number: float | None) -> list[float]:
    if not values:
        raise ValueError("values must not be empty")
    vals = [float(v) for v in values]
    if from_zero:
        vals.append(0.0)
    elif from_number is not None:
        vals.append(float(from_number))
    return vals


def scaler(
    values: Sequence[float],
    *,
    from_zero: bool = False,
    from_number: float | None = None,
) -> float:
    """
    Range used as the denominator of all height math.

    Args:
        values (Sequence[float]): Non-empty data values.
        from_zero (bool): Include 0 in the range.
        from_number (float | None): Include this number in the range.

    Returns:
        float: max - min of the (anchored) values, or 1.0 when that is 0.

    Raises:
        ValueError: If values is empty.

    Examples:
        >>> scaler([5, 5, 5])
        1.0
        >>> scaler([2, 10], from_zero=True)
        10.0
    """
    vals = _anchored(values, from_zero, from_number)
    rng = max(vals) - min(vals)
    if rng == 0:
        logger.debug("zero data range for %d values; substituting unit scale", len(values))
        return 1.0
    return rng


def range_anchor(
    values: Sequence[float],
    *,
    from_zero: bool = False,
    from_number: float | None = None,
) -> float:
    """
    Lower bound of the value axis (the value of tick 0).

    Returns:
        float: 0 under from_zero, else min(values). from_number widens the scaler
        only; tick 0 stays on the data minimum.

    Examples:
        >>> range_anchor([0, 120], from_number=-50)
        0.0
    """
    if not values:
        raise ValueError("values must not be empty")
    if from_zero:
        return 0.0
    return float(min(values))


def base_height(
    values: Sequence[float],
    height: float,
    *,
    from_zero: bool = False,
    from_number: float | None = None,
) -> float:
    """
    Vertical offset of the zero line measured from the top of the plot band.

    Args:
        values (Sequence[float]): Non-empty data values.
        height (float): Plot band height.

    Returns:
        float: height when every value is >= 0, 0 when every value is <= 0 (and at
        least one is negative), otherwise height * max / scaler.
    """
    lo = min(values)
    hi = max(values)
    if lo >= 0 and hi >= 0:
        return float(height)
    if lo < 0 and hi <= 0:
        return 0.0
    return height * hi / scaler(values, from_zero=from_zero, from_number=from_number)


def height_for(
    value: float,
    values: Sequence[float],
    height: float,
    *,
    from_zero: bool = False,
    from_number: float | None = None,
) -> float:
    """
    Pixel height of one value.

    Args:
        value (float): Value to convert.
        values (Sequence[float]): Dataset the value belongs to (defines the regime).
        height (float): Plot band height.
        from_zero (bool): Measure from 0 instead of the data minimum/maximum.
        from_number (float | None): Range anchor forwarded to scaler.

    Returns:
        float: Signed pixel height.

    Examples:
        >>> height_for(5, [0, 10], 100)
        50.0
        >>> height_for(-5, [-10, -5], 100)
        0.0
    """
    lo = min(values)
    hi = max(values)
    s = scaler(values, from_zero=from_zero, from_number=from_number)
    if lo < 0 and hi > 0:
        return height * (value / s)
    if lo >= 0 and hi >= 0:
        return height * (value / s) if from_zero else height * ((value - lo) / s)
    return height * (value / s) if from_zero else height * ((value - hi) / s)
