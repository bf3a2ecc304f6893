"""
chartgeom.io: Settings, dataset readers and layout writers.

## Responsibilities
- ChartSettings: rendering defaults with env > TOML > defaults precedence.
- read: Dataset from JSON/CSV/Parquet files or Polars frames.
- write: canonical layout JSON (atomic) and tidy segment frames.

## Import DAG discipline
- Depends only on stdlib, polars, pydantic and chartgeom.core.
- MUST NOT import chartgeom.viz or the CLI.

## Examples
```python
from chartgeom.io import ChartSettings, read_dataset, write_layout_json
from chartgeom.layout import compute_layout
settings = ChartSettings.load()  # doctest: +SKIP
ds = read_dataset("weekly.json")  # doctest: +SKIP
layout = compute_layout(ds, settings.to_config(width=400, height=200))  # doctest: +SKIP
write_layout_json(layout, "out/weekly.layout.json")  # doctest: +SKIP
```
"""

from __future__ import annotations

from .config import ChartSettings
from .read import dataset_from_frame, read_dataset
from .write import layout_to_frame, write_layout_json

__all__ = [
    "ChartSettings",
    "dataset_from_frame",
    "read_dataset",
    "layout_to_frame",
    "write_layout_json",
]
