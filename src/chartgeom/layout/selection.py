"""
Highlighted-category state and press routing.

SelectionState is the only mutable piece of the layout layer. It is owned by one chart
instance, read by the category-label layout (bold text, hit region, underline) and
written synchronously by press dispatch before any callback runs, so observers always
see the post-press state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from chartgeom.core.errors import IndexOutOfRange
from chartgeom.core.geometry import PressTarget
from chartgeom.core.typing import ClickPayload

__all__ = [
    "SelectionState",
    "DefaultSelection",
    "check_index",
    "dispatch_press",
]

logger = logging.getLogger(__name__)

DefaultSelection = int | Literal["last", "first"] | None


def check_index(index: int, category_count: int) -> int:
    """
    Validate a category index.

    Raises:
        IndexOutOfRange: If index is outside [0, category_count).
    """
    if not 0 <= index < category_count:
        raise IndexOutOfRange(f"index {index} outside [0, {category_count})")
    return index


@dataclass
class SelectionState:
    """
    Currently selected category index (or None).

    Attributes:
        index (int | None): Selected category.
        category_count (int | None): Bound category count; None until bind() is called,
            in which case select() cannot validate and only rejects negative indices.

    Examples:
        >>> s = SelectionState()
        >>> s.bind(3)
        >>> s.select(2)
        2
        >>> s.current()
        2
    """

    index: int | None = None
    category_count: int | None = None

    @classmethod
    def initial(cls, category_count: int, default: DefaultSelection = "last") -> SelectionState:
        """
        Build a state bound to `category_count` with a default selection.

        Args:
            category_count (int): Number of categories (0 yields no selection).
            default: "last", "first", an explicit index, or None.

        Raises:
            IndexOutOfRange: If an explicit default index is out of range.
        """
        state = cls(category_count=category_count)
        if category_count == 0 or default is None:
            return state
        if default == "last":
            state.index = category_count - 1
        elif default == "first":
            state.index = 0
        else:
            state.index = check_index(int(default), category_count)
        return state

    def current(self) -> int | None:
        return self.index

    def bind(self, category_count: int) -> None:
        """Bind to a new category count; a selection that no longer fits is cleared."""
        self.category_count = category_count
        if self.index is not None and self.index >= category_count:
            logger.debug("clearing selection %d (category_count=%d)", self.index, category_count)
            self.index = None

    def select(self, index: int) -> int:
        """
        Select a category.

        Raises:
            IndexOutOfRange: If index is negative or, once bound, >= category_count.
        """
        if self.category_count is not None:
            check_index(index, self.category_count)
        elif index < 0:
            raise IndexOutOfRange(f"index {index} is negative")
        self.index = index
        return index

    def clear(self) -> None:
        self.index = None


def dispatch_press(
    target: PressTarget,
    selection: SelectionState,
    *,
    on_data_point_click: Callable[[ClickPayload], Any] | None = None,
    on_arrow_click: Callable[[dict[str, Any]], Any] | None = None,
) -> None:
    """
    Route a press: update the selection first, then invoke the matching callback.

    Category presses are ignored entirely when no on_data_point_click is registered.

    Raises:
        IndexOutOfRange: If a category press carries an out-of-range index.
    """
    if target.kind == "arrow":
        if on_arrow_click is not None:
            on_arrow_click(target.payload())
        return
    if on_data_point_click is None:
        return
    if target.index is None:
        raise IndexOutOfRange("category press without an index")
    selection.select(target.index)
    on_data_point_click(target.payload())
