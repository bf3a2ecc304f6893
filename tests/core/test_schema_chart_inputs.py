from __future__ import annotations

import pytest
from pydantic import ValidationError

from chartgeom.core.errors import ChartGeomError, SchemaError
from chartgeom.core.schema import ChartGeometryConfig, Dataset, ViewportMode


def test_config_defaults_and_plot_height() -> None:
    cfg = ChartGeometryConfig(width=400, height=200)
    assert cfg.plot_height == 150.0
    assert cfg.padding_top == 15
    assert cfg.padding_right == 50
    assert cfg.count == 4
    assert cfg.decimal_places == 2
    assert cfg.viewport_mode is ViewportMode.BOUNDED
    assert cfg.effective_label_color == "#000000"


def test_config_rejects_from_zero_with_from_number() -> None:
    with pytest.raises(ValidationError) as ei:
        ChartGeometryConfig(width=400, height=200, from_zero=True, from_number=5)
    assert "mutually exclusive" in str(ei.value)


def test_config_accepts_from_number_zero() -> None:
    cfg = ChartGeometryConfig(width=400, height=200, from_number=0)
    assert cfg.from_number == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0},
        {"height": -1},
        {"count": 0},
        {"bar_percentage": 0},
        {"background_gradient_to_opacity": 1.5},
        {"unknown_field": 1},
    ],
)
def test_config_range_violations(overrides: dict) -> None:
    kwargs = {"width": 400, "height": 200, **overrides}
    with pytest.raises(ValidationError):
        ChartGeometryConfig(**kwargs)


def test_visible_width_selects_scrollable_and_must_fit() -> None:
    cfg = ChartGeometryConfig(width=400, height=200, visible_width=240)
    assert cfg.viewport_mode is ViewportMode.SCROLLABLE
    with pytest.raises(ValidationError):
        ChartGeometryConfig(width=400, height=200, visible_width=500)


def test_hidden_indices_coerced_from_list() -> None:
    cfg = ChartGeometryConfig(width=400, height=200, hide_points_at_index=[1, 3, 3])
    assert cfg.hide_points_at_index == frozenset({1, 3})


def test_is_stacked_follows_legend_unless_explicit() -> None:
    ds = Dataset(labels=["A"], data=[[1, 2]], bar_colors=["#111", "#222"], legend=["x", "y"])
    bare = ds.model_copy(update={"legend": []})
    cfg = ChartGeometryConfig(width=400, height=200)
    assert cfg.is_stacked(ds) is True
    assert cfg.is_stacked(bare) is False
    forced = ChartGeometryConfig(width=400, height=200, stacked_bar=False)
    assert forced.is_stacked(ds) is False


def test_dataset_border_raw_and_percentile() -> None:
    ds = Dataset(labels=["A", "B"], data=[[60, 60], [30, 30]], bar_colors=["#111", "#222"])
    assert ds.category_sums() == [120.0, 60.0]
    assert ds.border() == 120.0
    assert ds.border(percentile=True) == 100.0


def test_dataset_border_never_negative_and_empty() -> None:
    neg = Dataset(labels=["A"], data=[[-5, -5]], bar_colors=["#111", "#222"])
    assert neg.border() == 0.0
    assert Dataset().border() == 0.0
    assert Dataset().max_segment_count == 0


def test_dataset_accepts_camel_case_colors() -> None:
    ds = Dataset.model_validate({"labels": ["A"], "data": [[1]], "barColors": ["#111"]})
    assert ds.bar_colors == ["#111"]


def test_schema_error_is_part_of_the_taxonomy() -> None:
    assert issubclass(SchemaError, ChartGeomError)
    assert issubclass(SchemaError, ValueError)
