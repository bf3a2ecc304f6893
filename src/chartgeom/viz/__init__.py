"""
chartgeom.viz: Drawing surfaces that paint a ChartLayout.

## Responsibilities
- surface: DrawingSurface protocol, RecordingSurface, and draw() (fixed paint order,
  press handlers bound to PressTarget).
- altair_surface: AltairSurface, a Vega-Lite backend in pixel space.

## Import DAG discipline
- Depends on: chartgeom.core, polars, altair (and stdlib).
- Never recomputes geometry; consumes ChartLayout only.

## Examples
```python
from chartgeom.core.schema import ChartGeometryConfig, Dataset
from chartgeom.layout import compute_layout
from chartgeom.viz import AltairSurface, draw
ds = Dataset(labels=["A", "B"], data=[[60, 60], [30, 30]], bar_colors=["#111", "#222"])
layout = compute_layout(ds, ChartGeometryConfig(width=400, height=200))
surface = AltairSurface(width=400, height=200)
draw(layout, surface)
spec = surface.to_dict()  # Vega-Lite JSON
```
"""

from __future__ import annotations

from .altair_surface import AltairSurface
from .surface import DrawCall, DrawingSurface, RecordingSurface, draw

__all__ = [
    "AltairSurface",
    "DrawCall",
    "DrawingSurface",
    "RecordingSurface",
    "draw",
]
