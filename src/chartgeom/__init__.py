"""
chartgeom: layout geometry for stacked bar charts.

## Layers
- chartgeom.core: pydantic contracts (Dataset, ChartGeometryConfig, ChartLayout), errors.
- chartgeom.layout: pure value-to-pixel math and ChartLayout assembly.
- chartgeom.viz: DrawingSurface protocol, RecordingSurface, AltairSurface.
- chartgeom.io: settings (env/TOML), dataset readers, layout writers.
- chartgeom.chart: StackedBarChart (selection state and press routing).
"""

from __future__ import annotations

from .chart import StackedBarChart
from .core.schema import ChartGeometryConfig, Dataset
from .layout.engine import compute_layout

__all__ = [
    "ChartGeometryConfig",
    "Dataset",
    "StackedBarChart",
    "compute_layout",
]

__version__ = "0.1.0"
