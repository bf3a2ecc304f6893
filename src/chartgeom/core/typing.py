"""
Lightweight typing aliases used across core models and the layout layer.

This module contains no runtime logic and is zero-IO.

Examples:
    >>> from chartgeom.core.typing import LabelFormatter
    >>> pct: LabelFormatter = lambda s: f"{s}%"
    >>> pct("12.50")
    '12.50%'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = [
    "LabelFormatter",
    "ClickPayload",
    "JsonDict",
]

# Caller-supplied label formatter (receives the already formatted number or label).
LabelFormatter = Callable[[str], str]

# Payload of on_data_point_click: {"index": int, "x": float, "y": float}.
ClickPayload = dict[str, Any]

JsonDict = dict[str, Any]
