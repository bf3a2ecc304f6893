"""
chartgeom.layout: numeric-to-geometry transformation for stacked bar charts.

## Responsibilities
- scale: value range (scaler), zero-line offset and value-to-pixel heights.
- ticks: value-axis ticks/labels, gridlines and category-axis labels.
- bars: stacked segment rectangles, value labels and legend.
- selection: SelectionState and press routing.
- viewport: bounded vs scrollable horizontal strategies.
- engine: validation at the boundary and ChartLayout assembly.

## Import DAG discipline
- Depends only on stdlib and chartgeom.core (pydantic models).
- Pure functions of their inputs; SelectionState is the only mutable object.

## Examples
```python
from chartgeom.core.schema import ChartGeometryConfig, Dataset
from chartgeom.layout import compute_layout
ds = Dataset(labels=["A"], data=[[60, 40]], bar_colors=["#111", "#222"])
layout = compute_layout(ds, ChartGeometryConfig(width=400, height=200, percentile=True))
[s.height for s in layout.bars[0].segments]  # [90.0, 60.0]
```
"""

from __future__ import annotations

from .engine import compute_layout, validate_dataset
from .scale import base_height, height_for, range_anchor, scaler
from .selection import SelectionState, dispatch_press
from .ticks import tick_positions, tick_values
from .viewport import BoundedViewport, ScrollableViewport, ViewportAdapter, viewport_for

__all__ = [
    "compute_layout",
    "validate_dataset",
    "base_height",
    "height_for",
    "range_anchor",
    "scaler",
    "SelectionState",
    "dispatch_press",
    "tick_positions",
    "tick_values",
    "BoundedViewport",
    "ScrollableViewport",
    "ViewportAdapter",
    "viewport_for",
]
