"""
Dataset readers.

Purpose
- Turn JSON documents and tabular files (CSV, Parquet) into chartgeom.core.schema.Dataset.
- Polars-first for tabular inputs: one row per category, a label column, and one column
  per segment (bottom segment first, in column order).

JSON layout
    {"labels": [...], "data": [[...], ...], "barColors": [...], "legend": [...]}
    ("bar_colors" is accepted as well.)

Notes
- Shape agreement is NOT checked here; chartgeom.layout.engine.validate_dataset raises
  DimensionMismatch at the layout boundary.
- Null cells in tabular inputs are read as 0.
- Tabular inputs may carry a JSON sidecar `<stem>.meta.json` with "barColors" and
  "legend"; explicit arguments win over the sidecar.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

import polars as pl
from pydantic import ValidationError

from chartgeom.core.schema import Dataset

from .errors import IoReadError

__all__ = [
    "dataset_from_frame",
    "read_dataset",
]

logger = logging.getLogger(__name__)

_TABULAR_SUFFIXES = {".csv", ".parquet", ".pq"}


def _read_sidecar(p: Path) -> dict[str, list[str]]:
    meta = p.with_suffix(".meta.json")
    if not meta.exists():
        return {}
    try:
        raw = json.loads(meta.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise IoReadError(f"malformed sidecar {meta}: {exc}") from exc
    if not isinstance(raw, dict):
        raise IoReadError(f"sidecar {meta} must hold a JSON object")
    out: dict[str, list[str]] = {}
    colors = raw.get("barColors", raw.get("bar_colors"))
    if colors is not None:
        out["bar_colors"] = [str(c) for c in colors]
    if raw.get("legend") is not None:
        out["legend"] = [str(x) for x in raw["legend"]]
    logger.debug("using sidecar %s", meta)
    return out


def dataset_from_frame(
    df: pl.DataFrame,
    *,
    label_col: str = "label",
    segment_cols: Sequence[str] | None = None,
    bar_colors: Sequence[str] = (),
    legend: Sequence[str] | None = None,
) -> Dataset:
    """
    Build a Dataset from a wide Polars frame.

    Args:
        df (pl.DataFrame): One row per category.
        label_col (str): Column holding category labels.
        segment_cols (Sequence[str] | None): Segment columns, bottom first. Defaults to
            every numeric column except label_col, in frame order.
        bar_colors (Sequence[str]): Color per segment column.
        legend (Sequence[str] | None): Legend entries; defaults to the segment column
            names. Pass [] to disable the legend (and stacking compaction).

    Returns:
        Dataset: Unvalidated dataset.

    Raises:
        IoReadError: If label_col or a segment column is missing or non-numeric.

    Examples:
        >>> import polars as pl
        >>> df = pl.DataFrame({"label": ["A", "B"], "x": [60, 30], "y": [60, 30]})
        >>> dataset_from_frame(df, bar_colors=["#111", "#222"]).data
        [[60.0, 60.0], [30.0, 30.0]]
    """
    if label_col not in df.columns:
        raise IoReadError(f"missing label column {label_col!r} (columns={df.columns!r})")
    if segment_cols is None:
        segment_cols = [c for c in df.columns if c != label_col and df.schema[c].is_numeric()]
    cols = list(segment_cols)
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise IoReadError(f"missing segment columns: {missing!r}")
    non_numeric = [c for c in cols if not df.schema[c].is_numeric()]
    if non_numeric:
        raise IoReadError(f"non-numeric segment columns: {non_numeric!r}")

    values = df.select(
        pl.col(label_col).cast(pl.Utf8).fill_null("").alias("_label"),
        *[pl.col(c).cast(pl.Float64).fill_null(0.0) for c in cols],
    )
    labels = values.get_column("_label").to_list()
    data = [list(row) for row in values.select(cols).iter_rows()] if cols else [[] for _ in labels]
    return Dataset(
        labels=labels,
        data=data,
        bar_colors=list(bar_colors),
        legend=list(cols if legend is None else legend),
    )


def read_dataset(
    path: str | os.PathLike[str],
    *,
    label_col: str = "label",
    segment_cols: Sequence[str] | None = None,
    bar_colors: Sequence[str] = (),
    legend: Sequence[str] | None = None,
) -> Dataset:
    """
    Read a Dataset from a JSON, CSV or Parquet file.

    Args:
        path: Source file; the suffix selects the reader.
        label_col / segment_cols / bar_colors / legend: Tabular options (see
            dataset_from_frame). bar_colors / legend, when given, replace the values
            of a JSON document.

    Raises:
        IoReadError: If the file is missing, malformed or has an unsupported suffix.
    """
    p = Path(path)
    if not p.exists():
        raise IoReadError(f"dataset file not found: {p}")
    suffix = p.suffix.lower()
    if suffix == ".json":
        try:
            ds = Dataset.model_validate_json(p.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise IoReadError(f"malformed dataset JSON in {p}: {exc}") from exc
        update: dict[str, list[str]] = {}
        if bar_colors:
            update["bar_colors"] = list(bar_colors)
        if legend is not None:
            update["legend"] = list(legend)
        if update:
            ds = ds.model_copy(update=update)
        logger.debug("read %d categories from %s", ds.category_count, p)
        return ds
    if suffix not in _TABULAR_SUFFIXES:
        raise IoReadError(f"unsupported dataset format {suffix!r} for {p}")
    try:
        df = pl.read_csv(p) if suffix == ".csv" else pl.read_parquet(p)
    except (pl.exceptions.PolarsError, OSError) as exc:
        raise IoReadError(f"failed to read {p}: {exc}") from exc
    sidecar = _read_sidecar(p)
    ds = dataset_from_frame(
        df,
        label_col=label_col,
        segment_cols=segment_cols,
        bar_colors=bar_colors or sidecar.get("bar_colors", ()),
        legend=legend if legend is not None else sidecar.get("legend"),
    )
    logger.debug("read %d categories from %s", ds.category_count, p)
    return ds
