from __future__ import annotations

import pytest

from chartgeom import StackedBarChart
from chartgeom.core.errors import DimensionMismatch, IndexOutOfRange
from chartgeom.core.geometry import PressTarget
from chartgeom.core.schema import ChartGeometryConfig, Dataset
from chartgeom.viz.surface import RecordingSurface

CFG = ChartGeometryConfig(width=400, height=200)


def _ds(n: int) -> Dataset:
    return Dataset(labels=[f"c{i}" for i in range(n)], data=[[i + 1, 1] for i in range(n)], bar_colors=["#111", "#222"])


def test_default_selection_is_last_category() -> None:
    chart = StackedBarChart(CFG)
    layout = chart.layout(_ds(4))
    assert chart.selection.current() == 3
    assert layout.selected_index == 3
    assert layout.label_for(3).text.style.font_weight == "bold"


def test_config_selected_index_overrides_default() -> None:
    chart = StackedBarChart(ChartGeometryConfig(width=400, height=200, selected_index=1), default_selection="first")
    chart.layout(_ds(3))
    assert chart.selection.current() == 1


def test_explicit_default_out_of_range_raises() -> None:
    chart = StackedBarChart(CFG, default_selection=5)
    with pytest.raises(IndexOutOfRange):
        chart.layout(_ds(3))


def test_bar_press_selects_then_notifies() -> None:
    seen: list[tuple[int | None, dict]] = []
    chart = StackedBarChart(CFG, on_data_point_click=lambda p: seen.append((chart.selection.current(), p)))
    surface = RecordingSurface()
    chart.render(_ds(3), surface)
    bar = next(c for c in surface.calls if c.op == "rect" and c.on_press is not None and c.args["width"] == 42)
    bar.press()
    index = seen[0][1]["index"]
    assert seen[0][0] == index
    assert chart.layout(_ds(3)).selected_index == index


def test_label_press_moves_highlight() -> None:
    chart = StackedBarChart(CFG, on_data_point_click=lambda p: None)
    layout = chart.layout(_ds(3))
    chart.press(layout.label_for(0).text.press)
    relaid = chart.layout(_ds(3))
    assert relaid.label_for(0).selected
    assert not relaid.label_for(2).selected


def test_press_out_of_range_raises() -> None:
    chart = StackedBarChart(CFG, on_data_point_click=lambda p: None)
    chart.layout(_ds(2))
    with pytest.raises(IndexOutOfRange):
        chart.press(PressTarget(index=2))
    with pytest.raises(IndexOutOfRange):
        chart.select(-1)


def test_press_ignored_without_callback() -> None:
    chart = StackedBarChart(CFG)
    chart.layout(_ds(3))
    chart.press(PressTarget(index=0))
    assert chart.selection.current() == 2


def test_arrow_callback() -> None:
    arrows: list[dict] = []
    chart = StackedBarChart(ChartGeometryConfig(width=400, height=200, with_arrows=True), on_arrow_click=arrows.append)
    layout = chart.layout(_ds(2))
    chart.press(layout.arrows[0].press)
    assert arrows == [{"arrow": "left"}]


def test_shrinking_dataset_clears_stale_selection() -> None:
    chart = StackedBarChart(CFG)
    chart.layout(_ds(5))
    layout = chart.layout(_ds(2))
    assert layout.selected_index is None
    assert chart.selection.current() is None


def test_failed_render_draws_nothing() -> None:
    chart = StackedBarChart(CFG)
    surface = RecordingSurface()
    bad = Dataset(labels=["A"], data=[[1, 2]], bar_colors=["#111"])
    with pytest.raises(DimensionMismatch):
        chart.render(bad, surface)
    assert surface.calls == []


def test_empty_then_populated_dataset() -> None:
    chart = StackedBarChart(CFG)
    assert chart.layout(Dataset()).is_empty
    assert chart.layout(_ds(2)).selected_index == 1


def test_label_formatters_are_applied() -> None:
    chart = StackedBarChart(CFG, format_y_label=lambda s: f"<{s}>", format_x_label=str.upper)
    layout = chart.layout(_ds(1))
    assert layout.value_labels[0].content == "<0.00>"
    assert layout.label_for(0).text.content == "C0"


def test_select_before_first_render_is_kept() -> None:
    chart = StackedBarChart(CFG)
    assert chart.select(0) == 0
    assert chart.layout(_ds(3)).selected_index == 0
    assert chart.selection.category_count == 3


def test_select_before_first_render_out_of_range_raises() -> None:
    chart = StackedBarChart(CFG)
    chart.select(5)
    with pytest.raises(IndexOutOfRange):
        chart.layout(_ds(3))


def test_select_before_render_survives_empty_dataset() -> None:
    chart = StackedBarChart(CFG)
    chart.select(1)
    assert chart.layout(_ds(0)).selected_index is None
    assert chart.layout(_ds(3)).selected_index == 1
