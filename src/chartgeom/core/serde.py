"""
Canonical JSON serialization for layouts.

Provides a single canonical JSON policy so exported layouts diff cleanly between
runs. Zero-IO; stdlib only.

Notes:
    - sort_keys=True, compact separators, ensure_ascii=False.
    - Floats are rounded to a fixed number of digits before dumping so that values
      such as 49.99999999999999 and 50.0 serialize identically.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

__all__ = [
    "round_floats",
    "json_dumps_canonical",
    "layout_fingerprint",
]


def round_floats(obj: Any, ndigits: int = 6) -> Any:
    """
    Recursively round floats inside dicts/lists/tuples.

    Args:
        obj (Any): JSON-like structure.
        ndigits (int): Digits kept after the decimal point.

    Returns:
        Any: Structure of the same shape with rounded floats. Tuples become lists.
    """
    if isinstance(obj, float):
        r = round(obj, ndigits)
        return 0.0 if r == 0 else r
    if isinstance(obj, dict):
        return {k: round_floats(v, ndigits) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [round_floats(v, ndigits) for v in obj]
    return obj


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string.
    """
    return json.dumps(round_floats(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def layout_fingerprint(obj: Any) -> str:
    """SHA-256 hex digest of the canonical JSON form of obj."""
    h = hashlib.sha256()
    h.update(json_dumps_canonical(obj).encode("utf-8"))
    return h.hexdigest()
