"""
Pydantic v2 models for chart inputs: the stacked dataset and the geometry
configuration consumed by every layout function.

Responsibilities
- Define Dataset (labels, per-category segment values, colors, legend).
- Define ChartGeometryConfig with explicitly enumerated fields and documented defaults.
- Enforce single-field ranges and the from_zero/from_number exclusivity rule.

Style
- Zero-IO (stdlib + pydantic only).
- Cross-field *dataset* shape rules (labels vs categories, colors vs segments) are NOT
  checked here; chartgeom.layout.engine.validate_dataset raises DimensionMismatch at the
  layout boundary so callers get a typed failure instead of a pydantic ValidationError.

References
- errors: src/chartgeom/core/errors.py (SchemaError, DimensionMismatch)
- constants: src/chartgeom/core/constants.py
- tests: tests/core/*
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import (
    BAR_PITCH_CONSTANT,
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_PADDING_RIGHT,
    DEFAULT_PADDING_TOP,
    DEFAULT_TICK_COUNT,
    PERCENTILE_BORDER,
    PLOT_AREA_RATIO,
    STACKING_COMPACTION,
)
from .errors import SchemaError

__all__ = [
    "Dataset",
    "ViewportMode",
    "ChartGeometryConfig",
]


class Dataset(BaseModel):
    """
    Stacked-bar dataset: one entry per category, one value per segment.

    Attributes:
        labels (list[str]): Category labels (one per category).
        data (list[list[float]]): Segment values per category, bottom segment first.
        bar_colors (list[str]): Color per segment position.
        legend (list[str]): Legend entry per segment position (empty disables stacking
            compaction and the legend block).

    Notes:
        Shape agreement between fields is checked by layout.engine.validate_dataset.

    Examples:
        >>> from chartgeom.core.schema import Dataset
        >>> ds = Dataset(labels=["A", "B"], data=[[60, 60], [30, 30]], bar_colors=["#111", "#222"])
        >>> ds.border(percentile=False)
        120.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    labels: list[str] = Field(default_factory=list)
    data: list[list[float]] = Field(default_factory=list)
    bar_colors: list[str] = Field(default_factory=list, alias="barColors")
    legend: list[str] = Field(default_factory=list)

    @property
    def category_count(self) -> int:
        return len(self.data)

    @property
    def max_segment_count(self) -> int:
        return max((len(x) for x in self.data), default=0)

    def category_sums(self) -> list[float]:
        """Raw segment sum for every category."""
        return [float(sum(x)) for x in self.data]

    def border(self, percentile: bool = False) -> float:
        """
        Normalization denominator for bar heights.

        Args:
            percentile (bool): When True the border is fixed at 100.

        Returns:
            float: 100 in percentile mode, else the maximum raw category sum (never
            below 0).
        """
        if percentile:
            return float(PERCENTILE_BORDER)
        return max([0.0, *self.category_sums()])


class ViewportMode(Enum):
    """Horizontal layout strategy."""

    BOUNDED = "bounded"
    SCROLLABLE = "scrollable"


class ChartGeometryConfig(BaseModel):
    """
    Geometry configuration for one render call.

    Attributes:
        width (float): Total chart width in pixels.
        height (float): Total chart height in pixels.
        padding_top (float): Offset of the plot band from the top edge.
        padding_right (float): Width reserved for value-axis labels on the left.
        count (int): Number of value-axis tick intervals (>= 1).
        from_zero (bool): Anchor the value range at 0.
        from_number (float | None): Anchor the value range at this number.
        decimal_places (int): Precision of value-axis labels.
        horizontal_label_rotation (float): Rotation of value-axis labels (degrees).
        vertical_label_rotation (float): Rotation of category labels (degrees).
        y_axis_interval (int): Stride of vertical gridlines.
        hide_points_at_index (frozenset[int]): Categories without a label node.
        percentile (bool): Normalize every category against 100.
        stacked_bar (bool | None): Apply stacking compaction; None derives it from a
            non-empty legend.
        bar_percentage (float): Bar width multiplier in bounded layouts.
        bar_radius (float): Corner radius applied to the top segment of each stack.
        y_axis_label (str): Prefix of every value-axis label.
        y_axis_suffix (str): Suffix of every value-axis label.
        y_labels_offset (float): Gap between value-axis labels and the plot.
        x_axis_label (str): Suffix of every category label.
        x_labels_offset (float): Extra vertical offset of category labels.
        hide_legend (bool): Suppress per-segment value labels (the legend block stays).
        stacking_compaction (float): Factor applied to bar x when stacking is active.
        pitch_constant (float): Added to the usable width before dividing by the
            category count (bounded pitch).
        visible_width (float | None): Width of the scroll window; activates
            scrollable layout when set.
        with_horizontal_labels / with_vertical_labels (bool): Axis label toggles.
        with_horizontal_lines / with_vertical_lines (bool): Gridline toggles.
        with_arrows (bool): Emit the pagination arrow affordances.
        color (str): Base color for gridlines and labels.
        label_color (str | None): Label color override.
        highlight_fill (str): Fill of the label hit region.
        accent_color (str): Fill of the selected-label underline and arrows.
        background_gradient_from / background_gradient_to (str): Background stops.
        background_gradient_from_opacity / background_gradient_to_opacity (float): Stop
            opacities in [0, 1].
        border_radius (float): Corner radius of the background rectangle.
        selected_index (int | None): Initial selection for chart instances.

    Raises:
        pydantic.ValidationError: On range violations or when from_zero and
            from_number are both set (SchemaError is the underlying cause).

    Examples:
        >>> from chartgeom.core.schema import ChartGeometryConfig
        >>> cfg = ChartGeometryConfig(width=400, height=200)
        >>> cfg.plot_height
        150.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    padding_top: float = DEFAULT_PADDING_TOP
    padding_right: float = DEFAULT_PADDING_RIGHT
    count: int = Field(DEFAULT_TICK_COUNT, ge=1)
    from_zero: bool = False
    from_number: float | None = None
    decimal_places: int = Field(DEFAULT_DECIMAL_PLACES, ge=0)
    horizontal_label_rotation: float = 0
    vertical_label_rotation: float = 0
    y_axis_interval: int = Field(1, ge=1)
    hide_points_at_index: frozenset[int] = frozenset()
    percentile: bool = False
    stacked_bar: bool | None = None
    bar_percentage: float = Field(1.0, gt=0)
    bar_radius: float = Field(0, ge=0)
    y_axis_label: str = ""
    y_axis_suffix: str = ""
    y_labels_offset: float = 12
    x_axis_label: str = ""
    x_labels_offset: float = 0
    hide_legend: bool = False
    stacking_compaction: float = Field(STACKING_COMPACTION, gt=0)
    pitch_constant: float = BAR_PITCH_CONSTANT
    visible_width: float | None = Field(None, gt=0)
    with_horizontal_labels: bool = True
    with_vertical_labels: bool = True
    with_horizontal_lines: bool = True
    with_vertical_lines: bool = False
    with_arrows: bool = False
    color: str = "#000000"
    label_color: str | None = None
    highlight_fill: str = "white"
    accent_color: str = "#99e5ea"
    background_gradient_from: str = "#ffffff"
    background_gradient_to: str = "#ffffff"
    background_gradient_from_opacity: float = Field(1.0, ge=0, le=1)
    background_gradient_to_opacity: float = Field(1.0, ge=0, le=1)
    border_radius: float = Field(0, ge=0)
    selected_index: int | None = None

    @field_validator("hide_points_at_index", mode="before")
    @classmethod
    def _coerce_hidden(cls, v: Any) -> Any:
        """Accept any iterable of ints (lists from JSON/TOML included)."""
        if v is None:
            return frozenset()
        if isinstance(v, (list, tuple, set)):
            return frozenset(int(i) for i in v)
        return v

    @model_validator(mode="after")
    def _check_combinations(self) -> ChartGeometryConfig:
        """
        Enforce cross-field rules.

        Raises:
            SchemaError: If from_zero and from_number are both set, or visible_width
                exceeds width.
        """
        if self.from_zero and self.from_number is not None:
            raise SchemaError("from_zero and from_number are mutually exclusive")
        if self.visible_width is not None and self.visible_width > self.width:
            raise SchemaError(
                f"visible_width ({self.visible_width}) must not exceed width ({self.width})"
            )
        return self

    @property
    def plot_height(self) -> float:
        """Height of the bar/gridline band (3/4 of the chart height)."""
        return self.height * PLOT_AREA_RATIO

    @property
    def viewport_mode(self) -> ViewportMode:
        return ViewportMode.SCROLLABLE if self.visible_width is not None else ViewportMode.BOUNDED

    @property
    def effective_label_color(self) -> str:
        return self.label_color or self.color

    def is_stacked(self, dataset: Dataset) -> bool:
        """Stacking compaction flag: explicit setting, else a non-empty legend."""
        if self.stacked_bar is not None:
            return self.stacked_bar
        return len(dataset.legend) != 0
