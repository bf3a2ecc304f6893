"""
Immutable geometry nodes emitted by the layout layer.

Every node is fully resolved (absolute pixel coordinates, concrete style) so a drawing
surface only has to paint it. Nodes carry a stable ``key`` derived from their role and
indices (e.g. ``bar:3:1``) so output structure is deterministic across renders.

Style
- Zero-IO (stdlib + pydantic only).
- Coordinates use the SVG convention: origin top-left, y grows downwards.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .schema import ViewportMode

__all__ = [
    "LineStyle",
    "RectStyle",
    "TextStyle",
    "PressTarget",
    "LineNode",
    "RectNode",
    "TextNode",
    "GradientStop",
    "LinearGradient",
    "CategoryLabel",
    "BarStack",
    "LegendEntry",
    "ViewportInfo",
    "ChartLayout",
]


class LineStyle(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    stroke: str
    stroke_opacity: float = 0.2
    stroke_dasharray: str | None = "5, 10"
    stroke_width: float = 1


class RectStyle(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    fill: str
    fill_opacity: float = 1.0
    rx: float = 0
    ry: float = 0


class TextStyle(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    fill: str
    fill_opacity: float = 0.8
    font_size: float = 12
    font_weight: Literal["normal", "bold"] = "normal"
    text_anchor: Literal["start", "middle", "end"] = "start"


class PressTarget(BaseModel):
    """
    What a press on a node means.

    Attributes:
        kind (str): "category" for bars and category labels, "arrow" for pagination.
        index (int | None): Category index for kind="category".
        x (float): Anchor x reported to on_data_point_click.
        y (float): Anchor y reported to on_data_point_click.
        arrow (str | None): "left" or "right" for kind="arrow".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["category", "arrow"] = "category"
    index: int | None = None
    x: float = 0.0
    y: float = 0.0
    arrow: Literal["left", "right"] | None = None

    def payload(self) -> dict[str, object]:
        """Callback payload: {index, x, y} for categories, {arrow} for arrows."""
        if self.kind == "arrow":
            return {"arrow": self.arrow}
        return {"index": self.index, "x": self.x, "y": self.y}


class LineNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    x1: float
    y1: float
    x2: float
    y2: float
    style: LineStyle


class RectNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    x: float
    y: float
    width: float
    height: float
    style: RectStyle
    press: PressTarget | None = None
    gradient_id: str | None = None


class TextNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    x: float
    y: float
    content: str
    style: TextStyle
    rotation: float = 0
    press: PressTarget | None = None


class GradientStop(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    offset: float
    color: str
    opacity: float = 1.0


class LinearGradient(BaseModel):
    """Background gradient definition (user-space coordinates)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    stops: tuple[GradientStop, ...]


class CategoryLabel(BaseModel):
    """
    Category-axis label group: hit region, text and optional underline accent.

    The three nodes share one PressTarget so a press anywhere selects the category.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    selected: bool
    hit_region: RectNode
    text: TextNode
    underline: RectNode | None = None

    def nodes(self) -> list[RectNode | TextNode]:
        out: list[RectNode | TextNode] = [self.hit_region, self.text]
        if self.underline is not None:
            out.append(self.underline)
        return out


class BarStack(BaseModel):
    """All segments (bottom first) and value labels of one category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    x: float
    width: float
    values: tuple[float, ...]
    total: float
    normalizer: float
    segments: tuple[RectNode, ...]
    value_labels: tuple[TextNode, ...] = ()

    @property
    def stacked_height(self) -> float:
        return sum(s.height for s in self.segments)


class LegendEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    swatch: RectNode
    text: TextNode


class ViewportInfo(BaseModel):
    """
    Resolved horizontal layout.

    Attributes:
        mode (ViewportMode): bounded or scrollable.
        visible_width (float): Width of the visible window.
        content_width (float): Width of the scrolling content (== visible_width when
            bounded).
        scroll_offset (float): Initial horizontal scroll position (rightmost category
            in view when scrollable).
        axis_pane_width (float): Width of the pinned value-axis pane (0 when bounded).
        bar_width (float): Width of one bar.
        pitch (float): Distance between consecutive category positions.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: ViewportMode
    visible_width: float
    content_width: float
    scroll_offset: float = 0.0
    axis_pane_width: float = 0.0
    bar_width: float = 0.0
    pitch: float = 0.0


class ChartLayout(BaseModel):
    """
    Complete geometry of one render.

    Attributes:
        width (float): Chart width.
        height (float): Chart height.
        border (float): Normalization denominator used for the value axis.
        tick_values (tuple[float, ...]): Numeric value of each value-axis label.
        background (RectNode | None): Background rectangle (gradient-filled).
        gradients (tuple[LinearGradient, ...]): Gradient definitions.
        horizontal_lines (tuple[LineNode, ...]): Value-axis gridlines (scrolling pane).
        vertical_lines (tuple[LineNode, ...]): Category gridlines.
        value_labels (tuple[TextNode, ...]): Value-axis labels (pinned pane).
        category_labels (tuple[CategoryLabel, ...]): Category-axis label groups.
        bars (tuple[BarStack, ...]): Stacked bars in category order.
        legend (tuple[LegendEntry, ...]): Legend swatches and texts.
        arrows (tuple[RectNode, ...]): Pagination affordances (when enabled).
        viewport (ViewportInfo | None): Horizontal layout resolution.
        selected_index (int | None): Selection used for label highlighting.
        is_empty (bool): True when the dataset had no categories.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float
    height: float
    border: float = 0.0
    tick_values: tuple[float, ...] = ()
    background: RectNode | None = None
    gradients: tuple[LinearGradient, ...] = ()
    horizontal_lines: tuple[LineNode, ...] = ()
    vertical_lines: tuple[LineNode, ...] = ()
    value_labels: tuple[TextNode, ...] = ()
    category_labels: tuple[CategoryLabel, ...] = ()
    bars: tuple[BarStack, ...] = ()
    legend: tuple[LegendEntry, ...] = ()
    arrows: tuple[RectNode, ...] = ()
    viewport: ViewportInfo | None = None
    selected_index: int | None = None
    is_empty: bool = False

    @classmethod
    def empty(cls, width: float, height: float) -> ChartLayout:
        """Valid layout with no axis and no bars."""
        return cls(width=width, height=height, is_empty=True)

    def label_for(self, index: int) -> CategoryLabel | None:
        for lab in self.category_labels:
            if lab.index == index:
                return lab
        return None
