from __future__ import annotations

import pytest

from chartgeom.core.errors import IndexOutOfRange
from chartgeom.core.geometry import PressTarget
from chartgeom.layout.selection import SelectionState, check_index, dispatch_press


def test_initial_selection_defaults() -> None:
    assert SelectionState.initial(5).current() == 4
    assert SelectionState.initial(5, "first").current() == 0
    assert SelectionState.initial(5, 2).current() == 2
    assert SelectionState.initial(5, None).current() is None
    assert SelectionState.initial(0).current() is None


def test_initial_explicit_index_out_of_range() -> None:
    with pytest.raises(IndexOutOfRange):
        SelectionState.initial(3, 3)


def test_select_validates_against_bound_count() -> None:
    s = SelectionState.initial(3)
    assert s.select(0) == 0
    with pytest.raises(IndexOutOfRange):
        s.select(3)
    with pytest.raises(IndexOutOfRange):
        s.select(-1)
    assert s.current() == 0


def test_unbound_state_rejects_negative_only() -> None:
    s = SelectionState()
    assert s.select(10) == 10
    with pytest.raises(IndexOutOfRange):
        s.select(-1)


def test_bind_clears_selection_that_no_longer_fits() -> None:
    s = SelectionState.initial(5)
    s.bind(3)
    assert s.current() is None
    s.select(1)
    s.bind(2)
    assert s.current() == 1
    s.clear()
    assert s.current() is None


def test_check_index_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        check_index(4, 4)
    assert check_index(3, 4) == 3


def test_press_updates_selection_before_callback() -> None:
    s = SelectionState.initial(3)
    seen: list[tuple[int | None, dict]] = []

    def on_click(payload: dict) -> None:
        seen.append((s.current(), payload))

    dispatch_press(PressTarget(index=1, x=10, y=20), s, on_data_point_click=on_click)
    assert seen == [(1, {"index": 1, "x": 10.0, "y": 20.0})]


def test_press_without_callback_is_ignored() -> None:
    s = SelectionState.initial(3)
    dispatch_press(PressTarget(index=0), s)
    assert s.current() == 2


def test_out_of_range_press_raises_and_keeps_selection() -> None:
    s = SelectionState.initial(3)
    calls: list[dict] = []
    with pytest.raises(IndexOutOfRange):
        dispatch_press(PressTarget(index=7), s, on_data_point_click=calls.append)
    assert calls == []
    assert s.current() == 2


def test_arrow_press_routes_to_arrow_callback() -> None:
    s = SelectionState.initial(3)
    arrows: list[dict] = []
    clicks: list[dict] = []
    dispatch_press(
        PressTarget(kind="arrow", arrow="left"),
        s,
        on_data_point_click=clicks.append,
        on_arrow_click=arrows.append,
    )
    assert arrows == [{"arrow": "left"}]
    assert clicks == []
    assert s.current() == 2
