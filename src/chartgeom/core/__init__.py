"""
Core package aggregator for chartgeom contracts (models, geometry nodes, errors, serde).

## Contracts (single source of truth)
- Schema: Dataset and ChartGeometryConfig (pydantic) with documented defaults.
- Geometry: immutable nodes (lines, rects, texts, gradients) and ChartLayout.
- Errors: SchemaError, DimensionMismatch, IndexOutOfRange.
- Serde: canonical JSON for layout export and fingerprints.
- Constants: plot band ratio, bar pitch constant, stacking compaction.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Coordinates follow the SVG convention (origin top-left, y downwards).

## Downstream usage
- chartgeom.layout: consumes Dataset/ChartGeometryConfig, emits geometry nodes.
- chartgeom.io: reads Dataset from files/frames and writes ChartLayout as JSON.
- chartgeom.viz: paints ChartLayout on a drawing surface.

## Examples
```python
from chartgeom.core.schema import ChartGeometryConfig, Dataset
ds = Dataset(labels=["A"], data=[[60, 40]], bar_colors=["#111", "#222"])
cfg = ChartGeometryConfig(width=400, height=200, percentile=True)
cfg.plot_height  # 150.0
```
"""

from __future__ import annotations

from .errors import ChartGeomError, DimensionMismatch, IndexOutOfRange, SchemaError
from .geometry import ChartLayout, PressTarget
from .schema import ChartGeometryConfig, Dataset, ViewportMode

__all__ = [
    "ChartGeomError",
    "DimensionMismatch",
    "IndexOutOfRange",
    "SchemaError",
    "ChartLayout",
    "PressTarget",
    "ChartGeometryConfig",
    "Dataset",
    "ViewportMode",
]
