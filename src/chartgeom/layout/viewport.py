"""
Horizontal layout strategies for category positions.

Two strategies share one interface so bar and label math never branch on the mode:

- BoundedViewport: content width equals the chart width; the category pitch shrinks as
  categories are added.
- ScrollableViewport: bar width and pitch are fixed fractions of the visible window;
  content width grows linearly with the category count, the value axis lives in a
  pinned pane, and the initial scroll offset shows the rightmost category.

Notes
- bar_x(i) is the left edge of category i's stack; label_x(i) is its center.
- Bounded positions are multiplied by the stacking compaction factor when stacking is
  active (legend present or stacked_bar=True).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from chartgeom.core.constants import (
    BAR_PADDING_OFFSET,
    BASE_BAR_WIDTH,
    SCROLL_BAR_FRACTION,
    SCROLL_OFFSET_FRACTION,
)
from chartgeom.core.geometry import ViewportInfo
from chartgeom.core.schema import ChartGeometryConfig, ViewportMode

__all__ = [
    "ViewportAdapter",
    "BoundedViewport",
    "ScrollableViewport",
    "viewport_for",
]


class ViewportAdapter(ABC):
    """Resolves bar width, pitch and absolute x positions for one render."""

    mode: ViewportMode
    category_count: int

    @property
    @abstractmethod
    def bar_width(self) -> float: ...

    @property
    @abstractmethod
    def pitch(self) -> float: ...

    @abstractmethod
    def bar_x(self, index: int) -> float:
        """Left edge of the stack for category `index`."""

    def label_x(self, index: int) -> float:
        """Center of category `index` (category label anchor)."""
        return self.bar_x(index) + self.bar_width / 2

    @property
    @abstractmethod
    def visible_width(self) -> float: ...

    @property
    @abstractmethod
    def content_width(self) -> float: ...

    @property
    def scroll_offset(self) -> float:
        return 0.0

    @property
    def axis_pane_width(self) -> float:
        return 0.0

    def info(self) -> ViewportInfo:
        return ViewportInfo(
            mode=self.mode,
            visible_width=self.visible_width,
            content_width=self.content_width,
            scroll_offset=self.scroll_offset,
            axis_pane_width=self.axis_pane_width,
            bar_width=self.bar_width,
            pitch=self.pitch,
        )


@dataclass(frozen=True)
class BoundedViewport(ViewportAdapter):
    """
    Fixed-width layout.

    Attributes:
        width (float): Chart width.
        padding_right (float): Value-axis gutter; bars start BAR_PADDING_OFFSET further.
        category_count (int): Number of categories (>= 1).
        bar_percentage (float): Bar width multiplier.
        pitch_constant (float): Added to the usable width before dividing by the count.
        compaction (float): Factor applied to bar_x (1.0 when not stacked).

    Examples:
        >>> vp = BoundedViewport(width=400, padding_right=50, category_count=2)
        >>> vp.pitch
        215.0
        >>> vp.bar_x(1)
        306.0
    """

    width: float
    padding_right: float
    category_count: int
    bar_percentage: float = 1.0
    pitch_constant: float = 100.0
    compaction: float = 1.0
    mode: ViewportMode = ViewportMode.BOUNDED

    @property
    def bar_padding(self) -> float:
        return self.padding_right + BAR_PADDING_OFFSET

    @property
    def bar_width(self) -> float:
        return BASE_BAR_WIDTH * self.bar_percentage

    @property
    def pitch(self) -> float:
        return (self.width - self.bar_padding + self.pitch_constant) / self.category_count

    def bar_x(self, index: int) -> float:
        return (self.bar_padding + index * self.pitch + self.bar_width / 2) * self.compaction

    @property
    def visible_width(self) -> float:
        return self.width

    @property
    def content_width(self) -> float:
        return self.width


@dataclass(frozen=True)
class ScrollableViewport(ViewportAdapter):
    """
    Scroll-window layout with a fixed per-category pitch.

    Attributes:
        window (float): Visible width of the scroll window.
        category_count (int): Number of categories.
        padding_right (float): Width of the pinned value-axis pane.

    Examples:
        >>> vp = ScrollableViewport(window=120, category_count=10, padding_right=50)
        >>> (vp.bar_width, vp.pitch, vp.bar_x(0), vp.label_x(0))
        (20.0, 30.0, 10.0, 20.0)
        >>> vp.content_width
        310.0
    """

    window: float
    category_count: int
    padding_right: float = 0.0
    mode: ViewportMode = ViewportMode.SCROLLABLE

    @property
    def bar_width(self) -> float:
        return self.window * SCROLL_BAR_FRACTION

    @property
    def initial_offset(self) -> float:
        return self.window * SCROLL_OFFSET_FRACTION

    @property
    def pitch(self) -> float:
        return self.bar_width + self.initial_offset

    def bar_x(self, index: int) -> float:
        return self.initial_offset + index * self.pitch

    @property
    def visible_width(self) -> float:
        return self.window

    @property
    def content_width(self) -> float:
        return max(self.window, self.initial_offset + self.category_count * self.pitch)

    @property
    def scroll_offset(self) -> float:
        return max(0.0, self.content_width - self.window)

    @property
    def axis_pane_width(self) -> float:
        return self.padding_right


def viewport_for(config: ChartGeometryConfig, category_count: int, *, stacked: bool) -> ViewportAdapter:
    """
    Pick the strategy for a config.

    Args:
        config (ChartGeometryConfig): Geometry configuration; visible_width selects the
            scrollable strategy.
        category_count (int): Number of categories (>= 1).
        stacked (bool): Whether stacking compaction applies (bounded mode only).

    Returns:
        ViewportAdapter: BoundedViewport or ScrollableViewport.

    Raises:
        ValueError: If category_count < 1.
    """
    if category_count < 1:
        raise ValueError("category_count must be >= 1")
    if config.visible_width is not None:
        return ScrollableViewport(
            window=config.visible_width,
            category_count=category_count,
            padding_right=config.padding_right,
        )
    return BoundedViewport(
        width=config.width,
        padding_right=config.padding_right,
        category_count=category_count,
        bar_percentage=config.bar_percentage,
        pitch_constant=config.pitch_constant,
        compaction=config.stacking_compaction if stacked else 1.0,
    )
