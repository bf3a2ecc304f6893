"""
Altair (Vega-Lite) drawing surface.

Collects primitive calls into Polars frames and renders them as a layered Altair chart
in pixel space: every positional channel uses ``scale=None`` so the layout's absolute
coordinates (origin top-left, y downwards) map 1:1 onto the Vega-Lite view.

Notes
- Press handlers are accepted but not wired: Vega-Lite output is static. Interactive
  hosts call StackedBarChart.press() themselves.
- Marks are grouped by the properties Vega-Lite only supports at mark level
  (corner radius, dash pattern, text alignment/weight).
"""

from __future__ import annotations

from typing import Any

import altair as alt
import polars as pl

from chartgeom.core.geometry import LinearGradient, LineStyle, RectStyle, TextStyle

from .surface import PressHandler

__all__ = [
    "rgba",
    "AltairSurface",
]

_ALIGN = {"start": "left", "middle": "center", "end": "right"}


def rgba(color: str, opacity: float = 1.0) -> str:
    """
    Fold an opacity into a hex color.

    Examples:
        >>> rgba("#ff0000", 0.5)
        'rgba(255, 0, 0, 0.5)'
        >>> rgba("white", 0.5)
        'white'
    """
    c = color.strip()
    if not c.startswith("#") or len(c) not in (4, 7):
        return c
    if len(c) == 4:
        c = "#" + "".join(ch * 2 for ch in c[1:])
    r, g, b = (int(c[i : i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r}, {g}, {b}, {opacity:g})"


def _apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    return ch.configure_view(strokeOpacity=0)


class AltairSurface:
    """
    DrawingSurface that builds an Altair LayerChart.

    Examples:
        >>> from chartgeom.core.geometry import RectStyle
        >>> s = AltairSurface(width=100, height=50)
        >>> s.draw_rect(0, 0, 10, 20, RectStyle(fill="#111111"))
        >>> s.to_frames()["rects"].height
        1
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._lines: list[dict[str, Any]] = []
        self._rects: list[dict[str, Any]] = []
        self._texts: list[dict[str, Any]] = []
        self._gradients: dict[str, LinearGradient] = {}

    # ------------------------------------------------------------------
    # DrawingSurface
    # ------------------------------------------------------------------

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, style: LineStyle) -> None:
        self._lines.append(
            {
                "x": x1,
                "y": y1,
                "x2": x2,
                "y2": y2,
                "stroke": style.stroke,
                "opacity": style.stroke_opacity,
                "dash": style.stroke_dasharray or "",
                "stroke_width": style.stroke_width,
            }
        )

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        style: RectStyle,
        on_press: PressHandler | None = None,
        gradient_id: str | None = None,
    ) -> None:
        top, bottom = sorted((y, y + height))
        self._rects.append(
            {
                "x": x,
                "y": top,
                "x2": x + width,
                "y2": bottom,
                "fill": style.fill,
                "opacity": style.fill_opacity,
                "rx": float(style.rx),
                "gradient_id": gradient_id,
            }
        )

    def draw_text(
        self,
        x: float,
        y: float,
        content: str,
        style: TextStyle,
        rotation: float = 0,
        on_press: PressHandler | None = None,
    ) -> None:
        self._texts.append(
            {
                "x": x,
                "y": y,
                "text": content,
                "fill": style.fill,
                "opacity": style.fill_opacity,
                "font_size": float(style.font_size),
                "font_weight": style.font_weight,
                "align": _ALIGN[style.text_anchor],
                "angle": float(rotation) % 360,
            }
        )

    def draw_linear_gradient(self, gradient: LinearGradient) -> None:
        self._gradients[gradient.id] = gradient

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_frames(self) -> dict[str, pl.DataFrame]:
        """Recorded primitives as Polars frames keyed by "lines", "rects", "texts"."""
        return {
            "lines": pl.DataFrame(self._lines),
            "rects": pl.DataFrame(self._rects),
            "texts": pl.DataFrame(self._texts),
        }

    def _gradient(self, gradient_id: str) -> alt.LinearGradient | str:
        g = self._gradients.get(gradient_id)
        if g is None:
            return "#ffffff"
        span_x = g.x2 - g.x1 or 1.0
        span_y = g.y2 - g.y1 or 1.0
        return alt.LinearGradient(
            gradient="linear",
            stops=[alt.GradientStop(color=rgba(s.color, s.opacity), offset=s.offset) for s in g.stops],
            x1=0 if span_x > 0 else 1,
            x2=1 if span_x > 0 else 0,
            y1=0 if span_y > 0 else 1,
            y2=1 if span_y > 0 else 0,
        )

    def _rect_layers(self) -> tuple[list[alt.Chart], list[alt.Chart]]:
        """Gradient-filled rects and plain rects, as separate layer lists."""
        shaded_layers: list[alt.Chart] = []
        layers: list[alt.Chart] = []
        if not self._rects:
            return shaded_layers, layers
        df = pl.DataFrame(self._rects)
        shaded = df.filter(pl.col("gradient_id").is_not_null())
        for row in shaded.to_dicts():
            shaded_layers.append(
                alt.Chart(alt.Data(values=[row]))
                .mark_rect(color=self._gradient(row["gradient_id"]), cornerRadius=row["rx"])
                .encode(
                    x=alt.X("x:Q", scale=None),
                    x2="x2:Q",
                    y=alt.Y("y:Q", scale=None),
                    y2="y2:Q",
                )
            )
        plain = df.filter(pl.col("gradient_id").is_null())
        for (rx,), group in plain.group_by(["rx"], maintain_order=True):
            layers.append(
                alt.Chart(alt.Data(values=group.drop("gradient_id").to_dicts()))
                .mark_rect(cornerRadius=rx)
                .encode(
                    x=alt.X("x:Q", scale=None),
                    x2="x2:Q",
                    y=alt.Y("y:Q", scale=None),
                    y2="y2:Q",
                    color=alt.Color("fill:N", scale=None),
                    opacity=alt.Opacity("opacity:Q", scale=None),
                )
            )
        return shaded_layers, layers

    def _line_layers(self) -> list[alt.Chart]:
        layers: list[alt.Chart] = []
        if not self._lines:
            return layers
        df = pl.DataFrame(self._lines)
        for (dash,), group in df.group_by(["dash"], maintain_order=True):
            dash_list = [float(p) for p in str(dash).replace(",", " ").split()] if dash else []
            layers.append(
                alt.Chart(alt.Data(values=group.to_dicts()))
                .mark_rule(strokeDash=dash_list)
                .encode(
                    x=alt.X("x:Q", scale=None),
                    x2="x2:Q",
                    y=alt.Y("y:Q", scale=None),
                    y2="y2:Q",
                    color=alt.Color("stroke:N", scale=None),
                    opacity=alt.Opacity("opacity:Q", scale=None),
                )
            )
        return layers

    def _text_layers(self) -> list[alt.Chart]:
        layers: list[alt.Chart] = []
        if not self._texts:
            return layers
        df = pl.DataFrame(self._texts)
        keys = ["align", "font_weight", "font_size"]
        for (align, weight, size), group in df.group_by(keys, maintain_order=True):
            layers.append(
                alt.Chart(alt.Data(values=group.to_dicts()))
                .mark_text(align=align, fontWeight=weight, fontSize=size, baseline="alphabetic")
                .encode(
                    x=alt.X("x:Q", scale=None),
                    y=alt.Y("y:Q", scale=None),
                    text="text:N",
                    angle=alt.Angle("angle:Q", scale=None),
                    color=alt.Color("fill:N", scale=None),
                    opacity=alt.Opacity("opacity:Q", scale=None),
                )
            )
        return layers

    def to_chart(self) -> alt.TopLevelMixin:
        """
        Layered chart (background/rect gradients, rules, rects, texts).

        Returns:
            alt.TopLevelMixin: LayerChart sized to the surface.
        """
        shaded, rects = self._rect_layers()
        # background first, then gridlines under the bars
        layers = shaded + self._line_layers() + rects + self._text_layers()
        if not layers:
            layers = [alt.Chart(alt.Data(values=[{}])).mark_point(opacity=0)]
        chart = alt.layer(*layers).properties(width=self.width, height=self.height)
        return _apply_chart_defaults(chart)

    def to_dict(self) -> dict[str, Any]:
        """Vega-Lite JSON spec."""
        return self.to_chart().to_dict()
