"""
Chart geometry defaults.

Defines the numeric constants consumed by the layout layer. This module is zero-IO
and uses only the Python standard library.

Notes:
    - The plot band occupies the top PLOT_AREA_RATIO of the chart height; the rest is
      reserved for category labels.
    - Changing BAR_PITCH_CONSTANT or STACKING_COMPACTION shifts every bar in bounded
      layouts; both are exposed on ChartGeometryConfig so callers can override them.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "PLOT_AREA_RATIO",
    "DEFAULT_PADDING_TOP",
    "DEFAULT_PADDING_RIGHT",
    "DEFAULT_TICK_COUNT",
    "DEFAULT_DECIMAL_PLACES",
    "BAR_PADDING_OFFSET",
    "BASE_BAR_WIDTH",
    "BAR_PITCH_CONSTANT",
    "STACKING_COMPACTION",
    "SCROLL_BAR_FRACTION",
    "SCROLL_OFFSET_FRACTION",
    "VALUE_LABEL_MIN_HEIGHT",
    "FONT_SIZE",
    "PERCENTILE_BORDER",
]

# Fraction of the chart height used for bars and gridlines.
PLOT_AREA_RATIO: Final[float] = 3 / 4

DEFAULT_PADDING_TOP: Final[float] = 15
DEFAULT_PADDING_RIGHT: Final[float] = 50
DEFAULT_TICK_COUNT: Final[int] = 4
DEFAULT_DECIMAL_PLACES: Final[int] = 2

# Bars start this far right of padding_right in bounded layouts.
BAR_PADDING_OFFSET: Final[float] = 20

# Bar width in bounded layouts before bar_percentage is applied.
BASE_BAR_WIDTH: Final[float] = 42

# Added to the usable width before dividing by the category count (bounded pitch).
BAR_PITCH_CONSTANT: Final[float] = 100

# Horizontal compaction applied to bar positions when stacking is active.
STACKING_COMPACTION: Final[float] = 0.7

# Scrollable layouts: bar width = visible/6, initial offset = visible/12.
SCROLL_BAR_FRACTION: Final[float] = 1 / 6
SCROLL_OFFSET_FRACTION: Final[float] = 1 / 12

# Segments taller than this carry their value label inside the bar.
VALUE_LABEL_MIN_HEIGHT: Final[float] = 15

FONT_SIZE: Final[int] = 12

# Normalization denominator (border) in percentile mode.
PERCENTILE_BORDER: Final[float] = 100
