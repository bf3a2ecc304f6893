"""
Drawing-surface protocol and the layout painter.

A surface is any object with the four primitives below; chartgeom never paints pixels
itself. draw() walks a ChartLayout in a fixed order and binds each pressable node to
`on_press(target)` so the owner (normally StackedBarChart) can route the press.

Draw order
- gradient definitions → background → horizontal gridlines → vertical gridlines →
  value-axis labels → category labels → bars (segment, then its value label) →
  legend → arrows.

Scrollable layouts
- Pass `axis_surface` to paint value-axis labels on a pinned pane; everything else goes
  to the scrolling `surface`. Both use the same tick positions, so labels line up with
  gridlines.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Protocol, runtime_checkable

from chartgeom.core.geometry import (
    ChartLayout,
    LinearGradient,
    LineNode,
    LineStyle,
    PressTarget,
    RectNode,
    RectStyle,
    TextNode,
    TextStyle,
)

__all__ = [
    "PressHandler",
    "DrawingSurface",
    "DrawCall",
    "RecordingSurface",
    "draw",
]

PressHandler = Callable[[], Any]


@runtime_checkable
class DrawingSurface(Protocol):
    """Capability set consumed by draw()."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, style: LineStyle) -> None: ...

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        style: RectStyle,
        on_press: PressHandler | None = None,
        gradient_id: str | None = None,
    ) -> None: ...

    def draw_text(
        self,
        x: float,
        y: float,
        content: str,
        style: TextStyle,
        rotation: float = 0,
        on_press: PressHandler | None = None,
    ) -> None: ...

    def draw_linear_gradient(self, gradient: LinearGradient) -> None: ...


@dataclass
class DrawCall:
    """One recorded primitive call."""

    op: str
    args: dict[str, Any]
    on_press: PressHandler | None = None

    def press(self) -> Any:
        if self.on_press is None:
            raise RuntimeError(f"{self.op} call has no press handler")
        return self.on_press()


@dataclass
class RecordingSurface:
    """
    Surface that records calls instead of painting; used by tests and exporters.

    Examples:
        >>> s = RecordingSurface()
        >>> s.draw_line(0, 0, 10, 0, LineStyle(stroke="#000"))
        >>> s.ops()
        ['line']
    """

    calls: list[DrawCall] = field(default_factory=list)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, style: LineStyle) -> None:
        self.calls.append(DrawCall("line", {"x1": x1, "y1": y1, "x2": x2, "y2": y2, "style": style}))

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
        self.calls.append(
            DrawCall(
                "rect",
                {
                    "x": x,
                    "y": y,
                    "width": width,
                    "height": height,
                    "style": style,
                    "gradient_id": gradient_id,
                },
                on_press,
            )
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
        self.calls.append(
            DrawCall(
                "text",
                {"x": x, "y": y, "content": content, "style": style, "rotation": rotation},
                on_press,
            )
        )

    def draw_linear_gradient(self, gradient: LinearGradient) -> None:
        self.calls.append(DrawCall("gradient", {"gradient": gradient}))

    def ops(self) -> list[str]:
        return [c.op for c in self.calls]

    def texts(self) -> list[str]:
        return [c.args["content"] for c in self.calls if c.op == "text"]


def _handler(node: RectNode | TextNode, on_press: Callable[[PressTarget], Any] | None) -> PressHandler | None:
    if on_press is None or node.press is None:
        return None
    return partial(on_press, node.press)


def _line(surface: DrawingSurface, node: LineNode) -> None:
    surface.draw_line(node.x1, node.y1, node.x2, node.y2, node.style)


def _rect(surface: DrawingSurface, node: RectNode, on_press: Callable[[PressTarget], Any] | None) -> None:
    surface.draw_rect(
        node.x,
        node.y,
        node.width,
        node.height,
        node.style,
        on_press=_handler(node, on_press),
        gradient_id=node.gradient_id,
    )


def _text(surface: DrawingSurface, node: TextNode, on_press: Callable[[PressTarget], Any] | None) -> None:
    surface.draw_text(
        node.x,
        node.y,
        node.content,
        node.style,
        rotation=node.rotation,
        on_press=_handler(node, on_press),
    )


def draw(
    layout: ChartLayout,
    surface: DrawingSurface,
    *,
    on_press: Callable[[PressTarget], Any] | None = None,
    axis_surface: DrawingSurface | None = None,
) -> None:
    """
    Paint a layout.

    Args:
        layout (ChartLayout): Geometry from chartgeom.layout.compute_layout.
        surface (DrawingSurface): Target for everything except pinned axis labels.
        on_press (Callable[[PressTarget], Any] | None): Receives the PressTarget of a
            pressed node; nodes are not pressable when None.
        axis_surface (DrawingSurface | None): Pinned pane for value-axis labels
            (defaults to `surface`).

    Notes:
        An empty layout draws nothing.
    """
    if layout.is_empty:
        return
    axis = axis_surface if axis_surface is not None else surface
    for gradient in layout.gradients:
        surface.draw_linear_gradient(gradient)
    if layout.background is not None:
        _rect(surface, layout.background, None)
    for line in layout.horizontal_lines:
        _line(surface, line)
    for line in layout.vertical_lines:
        _line(surface, line)
    for text in layout.value_labels:
        _text(axis, text, None)
    for group in layout.category_labels:
        for node in group.nodes():
            if isinstance(node, TextNode):
                _text(surface, node, on_press)
            else:
                _rect(surface, node, on_press)
    for stack in layout.bars:
        labels = list(stack.value_labels)
        for z, segment in enumerate(stack.segments):
            _rect(surface, segment, on_press)
            if z < len(labels):
                _text(surface, labels[z], on_press)
    for entry in layout.legend:
        _rect(surface, entry.swatch, None)
        _text(surface, entry.text, None)
    for arrow in layout.arrows:
        _rect(surface, arrow, on_press)
