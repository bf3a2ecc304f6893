"""
Layout boundary: validate inputs once, then assemble a ChartLayout.

Control flow
1) validate_dataset: DimensionMismatch on label/category or color/segment disagreement.
2) Empty dataset → ChartLayout.empty() (no axis, no bars, no NaN).
3) Selection check: IndexOutOfRange when the selected index is outside the data.
4) border → viewport strategy → gridlines + value labels (shared tick math) →
   category labels → bars → legend → arrows.

Nothing here calls a drawing surface; chartgeom.viz.surface.draw paints the result.
"""

from __future__ import annotations

import logging

from chartgeom.core.geometry import (
    ChartLayout,
    GradientStop,
    LinearGradient,
    PressTarget,
    RectNode,
    RectStyle,
)
from chartgeom.core.errors import DimensionMismatch
from chartgeom.core.schema import ChartGeometryConfig, Dataset, ViewportMode
from chartgeom.core.typing import LabelFormatter

from .bars import layout_bars, layout_legend
from .selection import check_index
from .ticks import (
    category_labels,
    horizontal_grid_lines,
    tick_values,
    value_axis_labels,
    vertical_grid_lines,
)
from .viewport import ViewportAdapter, viewport_for

__all__ = [
    "validate_dataset",
    "compute_layout",
]

logger = logging.getLogger(__name__)

_BACKGROUND_GRADIENT_ID = "backgroundGradient"
_ARROW_SIZE = 25
_ARROW_LEFT_INSET = 80
_ARROW_RIGHT_INSET = 40


def validate_dataset(dataset: Dataset) -> None:
    """
    Check shape agreement between labels, categories, colors and legend.

    Raises:
        DimensionMismatch: If label count != category count, a category has no
            segments, colors do not cover the longest category, or the legend has more
            entries than colors.
    """
    n = dataset.category_count
    if len(dataset.labels) != n:
        raise DimensionMismatch(f"{len(dataset.labels)} labels for {n} categories")
    for i, values in enumerate(dataset.data):
        if len(values) == 0:
            raise DimensionMismatch(f"category {i} ({dataset.labels[i]!r}) has no segments")
    need = dataset.max_segment_count
    if len(dataset.bar_colors) < need:
        raise DimensionMismatch(
            f"{len(dataset.bar_colors)} colors for categories with up to {need} segments"
        )
    if len(dataset.legend) > len(dataset.bar_colors):
        raise DimensionMismatch(
            f"{len(dataset.legend)} legend entries for {len(dataset.bar_colors)} colors"
        )


def _background(config: ChartGeometryConfig) -> tuple[RectNode, LinearGradient]:
    gradient = LinearGradient(
        id=_BACKGROUND_GRADIENT_ID,
        x1=0,
        y1=config.height,
        x2=config.width,
        y2=0,
        stops=(
            GradientStop(
                offset=0,
                color=config.background_gradient_from,
                opacity=config.background_gradient_from_opacity,
            ),
            GradientStop(
                offset=1,
                color=config.background_gradient_to,
                opacity=config.background_gradient_to_opacity,
            ),
        ),
    )
    rect = RectNode(
        key="background",
        x=0,
        y=0,
        width=config.width,
        height=config.height,
        style=RectStyle(fill=config.background_gradient_from, rx=config.border_radius, ry=config.border_radius),
        gradient_id=gradient.id,
    )
    return rect, gradient


def _arrows(config: ChartGeometryConfig) -> tuple[RectNode, ...]:
    style = RectStyle(fill=config.accent_color)
    return (
        RectNode(
            key="arrow:left",
            x=config.width - _ARROW_LEFT_INSET,
            y=0,
            width=_ARROW_SIZE,
            height=_ARROW_SIZE,
            style=style,
            press=PressTarget(kind="arrow", arrow="left"),
        ),
        RectNode(
            key="arrow:right",
            x=config.width - _ARROW_RIGHT_INSET,
            y=0,
            width=_ARROW_SIZE,
            height=_ARROW_SIZE,
            style=style,
            press=PressTarget(kind="arrow", arrow="right"),
        ),
    )


def _grid_span(config: ChartGeometryConfig, viewport: ViewportAdapter) -> tuple[float, float]:
    if viewport.mode is ViewportMode.SCROLLABLE:
        return 0.0, viewport.content_width
    return config.padding_right, config.width


def compute_layout(
    dataset: Dataset,
    config: ChartGeometryConfig,
    *,
    selected_index: int | None = None,
    format_y_label: LabelFormatter | None = None,
    format_x_label: LabelFormatter | None = None,
) -> ChartLayout:
    """
    Compute the full stacked-bar geometry for one render.

    Args:
        dataset (Dataset): Categories, segment values, colors and legend.
        config (ChartGeometryConfig): Geometry configuration.
        selected_index (int | None): Highlighted category (label bold + accent).
        format_y_label (LabelFormatter | None): Value-axis label formatter.
        format_x_label (LabelFormatter | None): Category label formatter.

    Returns:
        ChartLayout: Fully resolved geometry; ChartLayout.empty() for zero categories.

    Raises:
        DimensionMismatch: On label/category or color/segment disagreement.
        IndexOutOfRange: If selected_index is outside [0, category_count).

    Examples:
        >>> from chartgeom.core.schema import ChartGeometryConfig, Dataset
        >>> ds = Dataset(labels=["A", "B"], data=[[60, 60], [30, 30]], bar_colors=["#111", "#222"])
        >>> layout = compute_layout(ds, ChartGeometryConfig(width=400, height=200))
        >>> layout.border
        120.0
        >>> [s.height for s in layout.bars[0].segments]
        [75.0, 75.0]
    """
    validate_dataset(dataset)
    n = dataset.category_count
    if n == 0:
        logger.debug("empty dataset; returning empty layout")
        return ChartLayout.empty(config.width, config.height)
    if selected_index is not None:
        check_index(selected_index, n)

    border = dataset.border(config.percentile)
    stacked = config.is_stacked(dataset)
    viewport = viewport_for(config, n, stacked=stacked)
    axis_values = [0.0, border]

    background, gradient = _background(config)
    x_start, x_end = _grid_span(config, viewport)

    horizontal_lines = (
        horizontal_grid_lines(config, x_start, x_end) if config.with_horizontal_lines else []
    )
    vertical_lines = (
        vertical_grid_lines(n, config, x_start, x_end) if config.with_vertical_lines else []
    )
    value_labels = (
        value_axis_labels(axis_values, config, format_y_label=format_y_label)
        if config.with_horizontal_labels
        else []
    )
    labels = (
        category_labels(
            dataset.labels,
            config,
            viewport,
            selected_index=selected_index,
            hidden=config.hide_points_at_index,
            format_x_label=format_x_label,
        )
        if config.with_vertical_labels
        else []
    )
    bars = layout_bars(dataset.data, dataset.bar_colors, config, viewport, border=border)
    legend = layout_legend(dataset.legend, dataset.bar_colors, config) if dataset.legend else []

    logger.debug(
        "layout: %d categories, border=%s, mode=%s, stacked=%s",
        n,
        border,
        viewport.mode.value,
        stacked,
    )
    return ChartLayout(
        width=config.width,
        height=config.height,
        border=border,
        tick_values=tuple(
            tick_values(
                axis_values,
                config.count,
                from_zero=config.from_zero,
                from_number=config.from_number,
            )
        ),
        background=background,
        gradients=(gradient,),
        horizontal_lines=tuple(horizontal_lines),
        vertical_lines=tuple(vertical_lines),
        value_labels=tuple(value_labels),
        category_labels=tuple(labels),
        bars=tuple(bars),
        legend=tuple(legend),
        arrows=_arrows(config) if config.with_arrows else (),
        viewport=viewport.info(),
        selected_index=selected_index,
    )
