"""
Axis labels and gridlines.

Value axis
- tick_values / tick_positions are the only tick formulas; gridlines (scrolling pane)
  and value labels (pinned pane in scrollable layouts) both consume them, so a label
  always sits on its gridline.
- count == 1 yields a single label carrying the first data value verbatim (formatted),
  not an interpolated tick.

Category axis
- One label group per visible category: hit region, text, and for the selected
  category a bold text plus underline accent. Hidden indices get no group at all but
  keep their pitch slot (positions come from the viewport, not from the visible count).
"""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence

from chartgeom.core.constants import FONT_SIZE
from chartgeom.core.geometry import (
    CategoryLabel,
    LineNode,
    LineStyle,
    PressTarget,
    RectNode,
    RectStyle,
    TextNode,
    TextStyle,
)
from chartgeom.core.schema import ChartGeometryConfig
from chartgeom.core.typing import LabelFormatter

from .scale import range_anchor, scaler
from .viewport import ViewportAdapter

__all__ = [
    "format_value",
    "tick_values",
    "tick_positions",
    "value_axis_labels",
    "horizontal_grid_lines",
    "vertical_grid_lines",
    "category_label_y",
    "category_labels",
]

# Hit region of a category label, relative to the label anchor.
_HIT_REGION_RISE = 24
_HIT_REGION_HEIGHT = 40
# Underline accent of the selected label, as fractions of the bar width.
_UNDERLINE_OFFSET = 0.3
_UNDERLINE_WIDTH = 0.625
_UNDERLINE_GAP = 4
_UNDERLINE_HEIGHT = 3


def _identity(s: str) -> str:
    return s


def format_value(value: float, decimal_places: int) -> str:
    """
    Fixed-precision text of a number.

    Examples:
        >>> format_value(12.5, 2)
        '12.50'
        >>> format_value(-0.0001, 2)
        '0.00'
    """
    text = f"{value:.{decimal_places}f}"
    # "-0.00" reads as a negative tick on a zero gridline
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def tick_values(
    values: Sequence[float],
    count: int,
    *,
    from_zero: bool = False,
    from_number: float | None = None,
) -> list[float]:
    """
    Numeric value of each value-axis label, bottom to top.

    Args:
        values (Sequence[float]): Non-empty values spanned by the axis.
        count (int): Number of tick intervals (>= 1).

    Returns:
        list[float]: count + 1 evenly spaced values from the range anchor, or
        [values[0]] when count == 1.

    Examples:
        >>> tick_values([0, 120], 4)
        [0.0, 30.0, 60.0, 90.0, 120.0]
        >>> tick_values([42, 7], 1)
        [42.0]
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    if count == 1:
        return [float(values[0])]
    step = scaler(values, from_zero=from_zero, from_number=from_number) / count
    anchor = range_anchor(values, from_zero=from_zero, from_number=from_number)
    return [step * i + anchor for i in range(count + 1)]


def tick_positions(config: ChartGeometryConfig) -> list[float]:
    """
    Vertical position of tick i (i = 0 at the plot baseline, i = count at the top).

    Returns:
        list[float]: count + 1 y coordinates, y_i = plot_h - plot_h / count * i + padding_top.
    """
    plot_h = config.plot_height
    step = plot_h / config.count
    return [plot_h - step * i + config.padding_top for i in range(config.count + 1)]


def _label_style(config: ChartGeometryConfig, **overrides: object) -> TextStyle:
    return TextStyle(fill=config.effective_label_color, font_size=FONT_SIZE, **overrides)  # type: ignore[arg-type]


def _line_style(config: ChartGeometryConfig) -> LineStyle:
    return LineStyle(stroke=config.color)


def value_axis_labels(
    values: Sequence[float],
    config: ChartGeometryConfig,
    *,
    format_y_label: LabelFormatter | None = None,
) -> list[TextNode]:
    """
    Value-axis label nodes.

    Args:
        values (Sequence[float]): Values spanned by the axis (for stacked bars: [0, border]).
        config (ChartGeometryConfig): Geometry; count, decimal_places, prefix/suffix,
            rotation and from_zero/from_number are honored.
        format_y_label (LabelFormatter | None): Applied to the fixed-precision number
            before prefix/suffix.

    Returns:
        list[TextNode]: One node per tick (exactly one when count == 1).
    """
    fmt = format_y_label or _identity
    ticks = tick_values(
        values, config.count, from_zero=config.from_zero, from_number=config.from_number
    )
    positions = tick_positions(config)
    x = config.padding_right - config.y_labels_offset
    style = _label_style(config, text_anchor="end")
    out: list[TextNode] = []
    for i, value in enumerate(ticks):
        if config.count == 1 and config.from_zero:
            y = config.padding_top + 4
        else:
            y = positions[i]
        content = f"{config.y_axis_label}{fmt(format_value(value, config.decimal_places))}{config.y_axis_suffix}"
        out.append(
            TextNode(
                key=f"ylabel:{i}",
                x=x,
                y=y,
                content=content,
                style=style,
                rotation=config.horizontal_label_rotation,
            )
        )
    return out


def horizontal_grid_lines(config: ChartGeometryConfig, x_start: float, x_end: float) -> list[LineNode]:
    """Dashed gridline at every tick position (count + 1 lines, also when count == 1)."""
    style = _line_style(config)
    return [
        LineNode(key=f"hline:{i}", x1=x_start, y1=y, x2=x_end, y2=y, style=style)
        for i, y in enumerate(tick_positions(config))
    ]


def vertical_grid_lines(
    category_count: int,
    config: ChartGeometryConfig,
    x_start: float | None = None,
    x_end: float | None = None,
) -> list[LineNode]:
    """
    Category gridlines every `y_axis_interval` categories.

    Args:
        category_count (int): Number of categories.
        config (ChartGeometryConfig): Geometry (y_axis_interval, plot height).
        x_start (float | None): Left edge of the spanned band (default padding_right).
        x_end (float | None): Right edge of the spanned band (default width).

    Returns:
        list[LineNode]: ceil(n / interval) vertical lines from the top edge to the plot
        baseline.
    """
    if category_count < 1:
        return []
    interval = config.y_axis_interval
    slots = category_count / interval
    left = config.padding_right if x_start is None else x_start
    right = config.width if x_end is None else x_end
    usable = right - left
    y2 = config.plot_height + config.padding_top
    style = _line_style(config)
    out: list[LineNode] = []
    for i in range(math.ceil(slots)):
        x = math.floor(usable / slots * i + left)
        out.append(LineNode(key=f"vline:{i}", x1=x, y1=0, x2=x, y2=y2, style=style))
    return out


def category_label_y(config: ChartGeometryConfig) -> float:
    return config.plot_height + config.padding_top + FONT_SIZE * 2 + config.x_labels_offset


def category_labels(
    labels: Sequence[str],
    config: ChartGeometryConfig,
    viewport: ViewportAdapter,
    *,
    selected_index: int | None = None,
    hidden: Collection[int] = (),
    format_x_label: LabelFormatter | None = None,
) -> list[CategoryLabel]:
    """
    Category-axis label groups.

    Args:
        labels (Sequence[str]): One label per category.
        config (ChartGeometryConfig): Geometry (rotation, colors, x_axis_label suffix).
        viewport (ViewportAdapter): Supplies label_x(i) and the bar width.
        selected_index (int | None): Category rendered bold with underline accent.
        hidden (Collection[int]): Indices that get no label group.
        format_x_label (LabelFormatter | None): Applied to the raw label before the
            x_axis_label suffix.

    Returns:
        list[CategoryLabel]: Groups in category order, hidden indices skipped.
    """
    fmt = format_x_label or _identity
    bar_width = viewport.bar_width
    y = category_label_y(config)
    anchor = "middle" if config.vertical_label_rotation == 0 else "start"
    out: list[CategoryLabel] = []
    for i, label in enumerate(labels):
        if i in hidden:
            continue
        x = viewport.label_x(i)
        press = PressTarget(kind="category", index=i, x=x, y=y)
        selected = i == selected_index
        hit = RectNode(
            key=f"xlabel:{i}:hit",
            x=x - bar_width * 0.5,
            y=y - _HIT_REGION_RISE,
            width=bar_width,
            height=_HIT_REGION_HEIGHT,
            style=RectStyle(fill=config.highlight_fill),
            press=press,
        )
        text = TextNode(
            key=f"xlabel:{i}:text",
            x=x,
            y=y,
            content=f"{fmt(label)}{config.x_axis_label}",
            style=_label_style(
                config, text_anchor=anchor, font_weight="bold" if selected else "normal"
            ),
            rotation=config.vertical_label_rotation,
            press=press,
        )
        underline = None
        if selected:
            underline = RectNode(
                key=f"xlabel:{i}:underline",
                x=x - bar_width * _UNDERLINE_OFFSET,
                y=y + _UNDERLINE_GAP,
                width=bar_width * _UNDERLINE_WIDTH,
                height=_UNDERLINE_HEIGHT,
                style=RectStyle(fill=config.accent_color),
                press=press,
            )
        out.append(CategoryLabel(index=i, selected=selected, hit_region=hit, text=text, underline=underline))
    return out
