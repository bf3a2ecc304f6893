from __future__ import annotations

import json

from chartgeom.core.geometry import PressTarget
from chartgeom.core.schema import ChartGeometryConfig, Dataset
from chartgeom.layout.engine import compute_layout
from chartgeom.viz.altair_surface import AltairSurface, rgba
from chartgeom.viz.surface import DrawingSurface, RecordingSurface, draw

DS = Dataset(labels=["A", "B"], data=[[60, 60], [30, 30]], bar_colors=["#111111", "#222222"], legend=["x", "y"])


def _layout(**kw):
    return compute_layout(DS, ChartGeometryConfig(width=400, height=200, **kw), selected_index=1)


def test_surfaces_satisfy_protocol() -> None:
    assert isinstance(RecordingSurface(), DrawingSurface)
    assert isinstance(AltairSurface(width=10, height=10), DrawingSurface)


def test_draw_order() -> None:
    s = RecordingSurface()
    draw(_layout(with_arrows=True), s)
    ops = s.ops()
    assert ops[:2] == ["gradient", "rect"]
    assert s.calls[1].args["gradient_id"] == "backgroundGradient"
    # 5 gridlines, 5 axis labels, then category label groups
    assert ops[2:7] == ["line"] * 5
    assert ops[7:12] == ["text"] * 5
    texts = s.texts()
    assert texts[:5] == ["0.00", "30.00", "60.00", "90.00", "120.00"]
    assert texts[5:7] == ["A", "B"]
    # segment then its value label
    assert texts[7:11] == ["60", "60", "30", "30"]
    assert texts[-2:] == ["x", "y"]
    assert ops[-2:] == ["rect", "rect"]


def test_axis_labels_go_to_pinned_surface() -> None:
    main, axis = RecordingSurface(), RecordingSurface()
    draw(_layout(visible_width=240), main, axis_surface=axis)
    assert axis.texts() == ["0.00", "30.00", "60.00", "90.00", "120.00"]
    assert "0.00" not in main.texts()


def test_press_handlers_forward_targets() -> None:
    pressed: list[PressTarget] = []
    s = RecordingSurface()
    draw(_layout(with_arrows=True), s, on_press=pressed.append)
    pressable = [c for c in s.calls if c.on_press is not None]
    assert pressable
    for call in pressable:
        call.press()
    kinds = {(t.kind, t.index) for t in pressed}
    assert ("category", 0) in kinds and ("category", 1) in kinds
    assert ("arrow", None) in kinds
    background = s.calls[1]
    assert background.on_press is None


def test_empty_layout_draws_nothing() -> None:
    s = RecordingSurface()
    draw(compute_layout(Dataset(), ChartGeometryConfig(width=400, height=200)), s)
    assert s.calls == []


def test_rgba() -> None:
    assert rgba("#fff", 0.25) == "rgba(255, 255, 255, 0.25)"
    assert rgba("#99e5ea") == "rgba(153, 229, 234, 1)"
    assert rgba("white", 0.1) == "white"


def test_altair_surface_builds_layered_vega_lite() -> None:
    surface = AltairSurface(width=400, height=200)
    draw(_layout(bar_radius=3), surface)
    frames = surface.to_frames()
    assert frames["rects"].height == 1 + 4 + 2 + 1 + 2  # background, bars, labels, underline, legend
    assert frames["lines"].height == 5
    spec = surface.to_dict()
    assert spec["width"] == 400 and spec["height"] == 200
    marks = json.dumps(spec["layer"])
    assert '"rule"' in marks and '"rect"' in marks and '"text"' in marks
    assert "gradient" in marks
    assert spec["layer"][0]["mark"]["color"]["gradient"] == "linear"


def test_altair_surface_empty_is_valid() -> None:
    spec = AltairSurface(width=50, height=50).to_dict()
    assert spec["width"] == 50
