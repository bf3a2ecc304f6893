"""
Layout writers.

Purpose
- Export a ChartLayout as canonical JSON (stable key order, rounded floats) with an
  atomic tmp → rename write path.
- Flatten bar segments into a tidy Polars frame for analysis or downstream charts.

Notes
- Atomicity via os.replace holds only when tmp and final share a filesystem; the tmp
  file is created next to the destination.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import polars as pl

from chartgeom.core.geometry import ChartLayout
from chartgeom.core.serde import json_dumps_canonical, layout_fingerprint
from chartgeom.core.typing import JsonDict

from .errors import IoWriteError

__all__ = [
    "layout_to_dict",
    "layout_to_frame",
    "write_json_atomic",
    "write_layout_json",
]

logger = logging.getLogger(__name__)

_SEGMENT_SCHEMA: dict[str, Any] = {
    "category": pl.Int64,
    "segment": pl.Int64,
    "value": pl.Float64,
    "normalizer": pl.Float64,
    "x": pl.Float64,
    "y": pl.Float64,
    "width": pl.Float64,
    "height": pl.Float64,
    "fill": pl.Utf8,
    "key": pl.Utf8,
}


def layout_to_dict(layout: ChartLayout) -> JsonDict:
    """JSON-ready mapping of a layout (enums as values, tuples as lists)."""
    return layout.model_dump(mode="json")


def layout_to_frame(layout: ChartLayout) -> pl.DataFrame:
    """
    One row per bar segment.

    Returns:
        pl.DataFrame: Columns category, segment, value, normalizer, x, y, width, height,
        fill, key (empty frame with that schema for an empty layout).
    """
    rows: list[dict[str, Any]] = []
    for stack in layout.bars:
        for z, seg in enumerate(stack.segments):
            rows.append(
                {
                    "category": stack.index,
                    "segment": z,
                    "value": stack.values[z],
                    "normalizer": stack.normalizer,
                    "x": seg.x,
                    "y": seg.y,
                    "width": seg.width,
                    "height": seg.height,
                    "fill": seg.style.fill,
                    "key": seg.key,
                }
            )
    return pl.DataFrame(rows, schema=_SEGMENT_SCHEMA)


def write_json_atomic(obj: Any, path: str | os.PathLike[str]) -> Path:
    """
    Write canonical JSON to `path` via a sibling tmp file and os.replace.

    Raises:
        IoWriteError: If the tmp write or the rename fails.
    """
    final = Path(path)
    final.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{final.name}.", suffix=".tmp", dir=final.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json_dumps_canonical(obj))
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, final)
    except OSError as exc:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise IoWriteError(f"failed to write {final}: {exc}") from exc
    return final


def write_layout_json(layout: ChartLayout, path: str | os.PathLike[str]) -> Path:
    """
    Export a layout as canonical JSON.

    Returns:
        Path: The written file.
    """
    payload = layout_to_dict(layout)
    out = write_json_atomic(payload, path)
    logger.debug("wrote layout %s to %s", layout_fingerprint(payload)[:12], out)
    return out
