from __future__ import annotations

import pytest

from chartgeom.core.schema import ChartGeometryConfig
from chartgeom.layout.scale import range_anchor, scaler
from chartgeom.layout.ticks import (
    category_label_y,
    category_labels,
    format_value,
    horizontal_grid_lines,
    tick_positions,
    tick_values,
    value_axis_labels,
    vertical_grid_lines,
)
from chartgeom.layout.viewport import BoundedViewport


def _cfg(**kw) -> ChartGeometryConfig:
    return ChartGeometryConfig(width=400, height=200, **kw)


def test_tick_values_span_zero_to_border() -> None:
    assert tick_values([0, 120], 4) == [0.0, 30.0, 60.0, 90.0, 120.0]


@pytest.mark.parametrize(
    "values, kwargs",
    [
        ([10, 20], {}),
        ([10, 20], {"from_zero": True}),
        ([10, 20], {"from_number": 50}),
        ([10, 20], {"from_number": -5}),
        ([-8, 3, 12], {}),
    ],
)
def test_tick_values_round_trip_the_range(values: list[float], kwargs: dict) -> None:
    ticks = tick_values(values, 5, **kwargs)
    assert len(ticks) == 6
    lo = 0.0 if kwargs.get("from_zero") else min(values)
    assert range_anchor(values, **kwargs) == lo
    assert ticks[0] == pytest.approx(lo)
    assert ticks[-1] == pytest.approx(lo + scaler(values, **kwargs))


def test_from_number_widens_range_but_ticks_start_at_data_minimum() -> None:
    assert tick_values([0, 120], 4, from_number=-50) == [0.0, 42.5, 85.0, 127.5, 170.0]
    assert tick_values([10, 20], 2, from_number=50) == [10.0, 30.0, 50.0]


def test_single_interval_yields_first_value() -> None:
    assert tick_values([42, 7], 1) == [42.0]
    labels = value_axis_labels([0, 120], _cfg(count=1))
    assert [t.content for t in labels] == ["0.00"]


def test_single_interval_from_zero_pins_label_to_top() -> None:
    labels = value_axis_labels([0, 120], _cfg(count=1, from_zero=True))
    assert len(labels) == 1
    assert labels[0].y == 15 + 4


def test_tick_values_rejects_zero_count() -> None:
    with pytest.raises(ValueError):
        tick_values([1, 2], 0)


def test_tick_positions_bottom_to_top() -> None:
    assert tick_positions(_cfg()) == [165.0, 127.5, 90.0, 52.5, 15.0]


def test_value_labels_sit_on_gridlines() -> None:
    cfg = _cfg(y_axis_label="$", y_axis_suffix="k")
    labels = value_axis_labels([0, 120], cfg)
    lines = horizontal_grid_lines(cfg, 50, 400)
    assert [t.y for t in labels] == [ln.y1 for ln in lines]
    assert [t.content for t in labels] == ["$0.00k", "$30.00k", "$60.00k", "$90.00k", "$120.00k"]
    assert all(t.x == 50 - 12 for t in labels)
    assert all(t.style.text_anchor == "end" for t in labels)


def test_value_label_formatter_applies_before_affixes() -> None:
    labels = value_axis_labels([0, 100], _cfg(count=2, y_axis_suffix="%"), format_y_label=lambda s: s.split(".")[0])
    assert [t.content for t in labels] == ["0%", "50%", "100%"]


def test_format_value_strips_negative_zero() -> None:
    assert format_value(-0.0001, 2) == "0.00"
    assert format_value(-1.5, 1) == "-1.5"
    assert format_value(3, 0) == "3"


def test_horizontal_lines_also_drawn_for_single_interval() -> None:
    lines = horizontal_grid_lines(_cfg(count=1), 50, 400)
    assert [ln.y1 for ln in lines] == [165.0, 15.0]
    assert lines[0].style.stroke_dasharray == "5, 10"


def test_vertical_lines_every_interval() -> None:
    lines = vertical_grid_lines(4, _cfg(y_axis_interval=2))
    assert [ln.x1 for ln in lines] == [50, 225]
    assert all(ln.y1 == 0 and ln.y2 == 165 for ln in lines)
    assert vertical_grid_lines(0, _cfg()) == []


def test_category_labels_skip_hidden_indices_but_keep_slots() -> None:
    cfg = _cfg()
    vp = BoundedViewport(width=400, padding_right=50, category_count=3)
    labels = category_labels(["A", "B", "C"], cfg, vp, hidden={1})
    assert [g.index for g in labels] == [0, 2]
    assert labels[1].text.x == vp.label_x(2)
    assert labels[0].text.y == category_label_y(cfg) == 150 + 15 + 24


def test_selected_category_label_is_bold_with_underline() -> None:
    cfg = _cfg(x_axis_label="!")
    vp = BoundedViewport(width=400, padding_right=50, category_count=2)
    labels = category_labels(["A", "B"], cfg, vp, selected_index=1, format_x_label=str.lower)
    plain, chosen = labels
    assert plain.underline is None
    assert plain.text.style.font_weight == "normal"
    assert chosen.text.style.font_weight == "bold"
    assert chosen.text.content == "b!"
    x = vp.label_x(1)
    u = chosen.underline
    assert u is not None
    assert (u.x, u.y, u.width, u.height) == pytest.approx((x - 0.3 * 42, 189 + 4, 0.625 * 42, 3))
    assert u.style.fill == "#99e5ea"
    hit = chosen.hit_region
    assert (hit.x, hit.y, hit.width, hit.height) == pytest.approx((x - 21, 189 - 24, 42, 40))
    assert hit.style.fill == "white"
    assert hit.press is not None and hit.press.index == 1
