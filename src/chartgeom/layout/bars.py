"""
Stacked bar geometry.

Math mapping
- plot_h = height * 3/4
- sum_i = sum(data[i]) in percentile mode, else border (max raw category sum)
- h_iz = plot_h * data[i][z] / sum_i            (0 when sum_i == 0)
- st_i,0 = padding_top;  y_iz = plot_h - h_iz + st_iz;  st_i,z+1 = st_iz - h_iz

Segments stack bottom-up: segment z + 1 sits directly on top of segment z. The stack
total equals plot_h exactly when the category's raw sum equals its normalizer.

Notes
- Corner rounding applies to the top segment only (z == len(data[i]) - 1) and only
  when bar_radius > 0.
- Value labels go inside the segment when it is taller than VALUE_LABEL_MIN_HEIGHT,
  else just below its top edge; hide_legend suppresses them.
- Every segment and value label carries the category PressTarget so bar presses and
  label presses update the same SelectionState.
"""

from __future__ import annotations

from collections.abc import Sequence

from chartgeom.core.constants import FONT_SIZE, VALUE_LABEL_MIN_HEIGHT
from chartgeom.core.geometry import (
    BarStack,
    LegendEntry,
    PressTarget,
    RectNode,
    RectStyle,
    TextNode,
    TextStyle,
)
from chartgeom.core.schema import ChartGeometryConfig

from .viewport import ViewportAdapter

__all__ = [
    "format_raw",
    "normalizer_for",
    "segment_heights",
    "layout_bars",
    "layout_legend",
]

# Horizontal nudge of value labels past the bar center.
_VALUE_LABEL_DX = 7
_VALUE_LABEL_INSIDE_DY = 15
_VALUE_LABEL_OUTSIDE_DY = 7

_LEGEND_SWATCH = 16
_LEGEND_SPACING = 50


def format_raw(value: float) -> str:
    """
    Text of a raw segment value (integers without a trailing '.0').

    Examples:
        >>> format_raw(60.0)
        '60'
        >>> format_raw(12.25)
        '12.25'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def normalizer_for(values: Sequence[float], border: float, percentile: bool) -> float:
    """Denominator of one category: its own sum in percentile mode, else the border."""
    return float(sum(values)) if percentile else float(border)


def segment_heights(values: Sequence[float], normalizer: float, plot_height: float) -> list[float]:
    """
    Pixel height of each segment.

    Examples:
        >>> segment_heights([60, 40], 100, 150)
        [90.0, 60.0]
        >>> segment_heights([0, 0], 0, 150)
        [0.0, 0.0]
    """
    if normalizer == 0:
        return [0.0 for _ in values]
    return [plot_height * (float(v) / normalizer) for v in values]


def layout_bars(
    data: Sequence[Sequence[float]],
    colors: Sequence[str],
    config: ChartGeometryConfig,
    viewport: ViewportAdapter,
    *,
    border: float,
) -> list[BarStack]:
    """
    Segment rectangles and value labels for every category.

    Args:
        data (Sequence[Sequence[float]]): Segment values per category (validated).
        colors (Sequence[str]): Color per segment position (validated to cover data).
        config (ChartGeometryConfig): Geometry; percentile, bar_radius, hide_legend and
            padding_top are honored.
        viewport (ViewportAdapter): Supplies bar_x(i) and bar_width.
        border (float): Global normalizer used outside percentile mode.

    Returns:
        list[BarStack]: One stack per category, in category order.
    """
    plot_h = config.plot_height
    bar_width = viewport.bar_width
    label_style = TextStyle(
        fill=config.effective_label_color, font_size=FONT_SIZE, text_anchor="end"
    )
    stacks: list[BarStack] = []
    for i, values in enumerate(data):
        normalizer = normalizer_for(values, border, config.percentile)
        heights = segment_heights(values, normalizer, plot_h)
        x = viewport.bar_x(i)
        top = len(values) - 1
        st = config.padding_top
        segments: list[RectNode] = []
        labels: list[TextNode] = []
        for z, (value, h) in enumerate(zip(values, heights, strict=True)):
            y = plot_h - h + st
            press = PressTarget(kind="category", index=i, x=x, y=y)
            radius = config.bar_radius if z == top and config.bar_radius else 0
            segments.append(
                RectNode(
                    key=f"bar:{i}:{z}",
                    x=x,
                    y=y,
                    width=bar_width,
                    height=h,
                    style=RectStyle(fill=colors[z], rx=radius, ry=radius),
                    press=press,
                )
            )
            if not config.hide_legend:
                dy = _VALUE_LABEL_INSIDE_DY if h > VALUE_LABEL_MIN_HEIGHT else _VALUE_LABEL_OUTSIDE_DY
                labels.append(
                    TextNode(
                        key=f"bar:{i}:{z}:value",
                        x=x + _VALUE_LABEL_DX + bar_width / 2,
                        y=y + dy,
                        content=format_raw(value),
                        style=label_style,
                        press=press,
                    )
                )
            st -= h
        stacks.append(
            BarStack(
                index=i,
                x=x,
                width=bar_width,
                values=tuple(float(v) for v in values),
                total=float(sum(values)),
                normalizer=normalizer,
                segments=tuple(segments),
                value_labels=tuple(labels),
            )
        )
    return stacks


def layout_legend(
    legend: Sequence[str],
    colors: Sequence[str],
    config: ChartGeometryConfig,
) -> list[LegendEntry]:
    """
    Legend swatches and texts, stacked upwards from 70% of the chart height.

    Notes:
        Drawn whenever the legend is non-empty; hide_legend only suppresses the
        per-segment value labels.
    """
    w, h = config.width, config.height
    style = TextStyle(fill=config.effective_label_color, font_size=FONT_SIZE)
    out: list[LegendEntry] = []
    for i, name in enumerate(legend):
        half = _LEGEND_SWATCH / 2
        swatch = RectNode(
            key=f"legend:{i}:swatch",
            x=w * 0.71,
            y=h * 0.7 - i * _LEGEND_SPACING,
            width=_LEGEND_SWATCH,
            height=_LEGEND_SWATCH,
            style=RectStyle(fill=colors[i], rx=half, ry=half),
        )
        text = TextNode(
            key=f"legend:{i}:text",
            x=w * 0.78,
            y=h * 0.76 - i * _LEGEND_SPACING,
            content=name,
            style=style,
        )
        out.append(LegendEntry(index=i, swatch=swatch, text=text))
    return out
