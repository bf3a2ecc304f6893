from __future__ import annotations

import pytest

from chartgeom.layout.scale import base_height, height_for, range_anchor, scaler


@pytest.mark.parametrize(
    "values, kwargs",
    [
        ([5, 5, 5], {}),
        ([7], {}),
        ([0, 0], {"from_zero": True}),
        ([3, 3], {"from_number": 3}),
        ([-2, -2], {}),
    ],
)
def test_collapsed_range_uses_unit_scale(values: list[float], kwargs: dict) -> None:
    assert scaler(values, **kwargs) == 1.0


def test_scaler_anchors_extend_the_range() -> None:
    assert scaler([2, 10]) == 8.0
    assert scaler([2, 10], from_zero=True) == 10.0
    assert scaler([2, 10], from_number=20) == 18.0
    assert scaler([2, 10], from_number=0) == 10.0


def test_range_anchor() -> None:
    assert range_anchor([2, 10]) == 2
    assert range_anchor([2, 10], from_zero=True) == 0
    assert range_anchor([2, 10], from_number=50) == 2
    assert range_anchor([2, 10], from_number=-4) == 2


def test_empty_values_raise() -> None:
    with pytest.raises(ValueError):
        scaler([])


def test_base_height_regimes() -> None:
    assert base_height([1, 2], 100) == 100.0
    assert base_height([0, 0], 100) == 100.0
    assert base_height([-1, -2], 100) == 0.0
    assert base_height([-10, 30], 100) == pytest.approx(75.0)


def test_height_for_nonnegative_measures_from_minimum() -> None:
    assert height_for(6, [2, 10], 100) == pytest.approx(50.0)
    assert height_for(2, [2, 10], 100) == 0.0
    assert height_for(6, [2, 10], 100, from_zero=True) == pytest.approx(60.0)


def test_height_for_nonpositive_measures_from_maximum() -> None:
    assert height_for(-5, [-10, -5], 100) == 0.0
    assert height_for(-10, [-10, -5], 100) == pytest.approx(-100.0)
    assert height_for(-10, [-10, -5], 100, from_zero=True) == pytest.approx(-100.0)


def test_height_for_mixed_sign_is_proportional() -> None:
    assert height_for(30, [-10, 30], 100) == pytest.approx(75.0)
    assert height_for(-10, [-10, 30], 100) == pytest.approx(-25.0)


def test_flat_series_renders_at_fixed_height() -> None:
    assert height_for(5, [5, 5], 100) == 0.0
    assert height_for(0, [0, 0], 100, from_zero=True) == 0.0
    assert height_for(3, [3], 100, from_number=3) == 0.0
