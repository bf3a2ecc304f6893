"""
Core exception types raised at the layout boundary.

Provides typed exceptions for chart-geometry failures:
- SchemaError for configuration combination rules (e.g. from_zero with from_number).
- DimensionMismatch when labels, categories, segments and colors disagree in shape.
- IndexOutOfRange when a selection or press index falls outside [0, category_count).

Notes:
    - A collapsed data range (ZeroRangeCondition) is not an exception: the scale
      substitutes a unit range and logs at DEBUG (see chartgeom.layout.scale).
    - An empty dataset is not an exception either: compute_layout short-circuits to
      ChartLayout.empty().
    - Every check runs before any drawing call so no partial geometry reaches a
      surface.

Examples:
    Catch a shape failure.

    >>> from chartgeom.core.errors import DimensionMismatch
    >>> try:
    ...     raise DimensionMismatch("2 labels for 3 categories")
    ... except ValueError as e:
    ...     msg = str(e)
    >>> "labels" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "ChartGeomError",
    "SchemaError",
    "DimensionMismatch",
    "IndexOutOfRange",
]


class ChartGeomError(Exception):
    """Base class for chartgeom failures."""


class SchemaError(ChartGeomError, ValueError):
    """Configuration validation failure (cross-field rules, ranges)."""


class DimensionMismatch(ChartGeomError, ValueError):
    """Label count differs from category count, or colors do not cover every segment."""


class IndexOutOfRange(ChartGeomError, IndexError):
    """Selection or press index outside [0, category_count)."""
