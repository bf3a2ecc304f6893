"""
Stacked bar chart instance: one engine parameterized by the viewport strategy.

StackedBarChart owns the only state that outlives a render (SelectionState) plus the
press callbacks. Geometry is recomputed from the dataset and config on every call; a
render validates first and only then touches the surface, so a failing render draws
nothing.

Examples:
    >>> from chartgeom.core.schema import ChartGeometryConfig, Dataset
    >>> from chartgeom.viz import RecordingSurface
    >>> clicks = []
    >>> chart = StackedBarChart(ChartGeometryConfig(width=400, height=200), on_data_point_click=clicks.append)
    >>> ds = Dataset(labels=["A", "B"], data=[[1, 2], [3, 4]], bar_colors=["#111", "#222"])
    >>> layout = chart.render(ds, RecordingSurface())
    >>> chart.selection.current()
    1
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from chartgeom.core.geometry import ChartLayout, PressTarget
from chartgeom.core.schema import ChartGeometryConfig, Dataset
from chartgeom.core.typing import ClickPayload, LabelFormatter
from chartgeom.layout.engine import compute_layout, validate_dataset
from chartgeom.layout.selection import DefaultSelection, SelectionState, dispatch_press
from chartgeom.viz.surface import DrawingSurface, draw

__all__ = ["StackedBarChart"]

logger = logging.getLogger(__name__)


class StackedBarChart:
    """
    Chart controller: selection state, press routing and render.

    Args:
        config (ChartGeometryConfig): Geometry configuration (replaceable via
            `config` attribute between renders).
        on_data_point_click (Callable | None): Receives {index, x, y} after the
            selection has been updated.
        on_arrow_click (Callable | None): Receives {arrow: "left" | "right"}.
        default_selection: Selection applied on the first render ("last", "first", an
            index, or None). config.selected_index takes precedence when set.
        format_y_label / format_x_label (LabelFormatter | None): Label formatters.

    Notes:
        Highlight-by-press requires on_data_point_click: without it, category
        presses leave the selection unchanged (use select() instead).
        select() before the first render is kept and validated against the
        first non-empty dataset (IndexOutOfRange when it does not fit).
    """

    def __init__(
        self,
        config: ChartGeometryConfig,
        *,
        on_data_point_click: Callable[[ClickPayload], Any] | None = None,
        on_arrow_click: Callable[[dict[str, Any]], Any] | None = None,
        default_selection: DefaultSelection = "last",
        format_y_label: LabelFormatter | None = None,
        format_x_label: LabelFormatter | None = None,
    ) -> None:
        self.config = config
        self.on_data_point_click = on_data_point_click
        self.on_arrow_click = on_arrow_click
        self.default_selection: DefaultSelection = (
            config.selected_index if config.selected_index is not None else default_selection
        )
        self.format_y_label = format_y_label
        self.format_x_label = format_x_label
        self.selection = SelectionState()
        self._initialized = False

    def _sync_selection(self, dataset: Dataset) -> None:
        n = dataset.category_count
        if not self._initialized and n > 0:
            # a select() made before the first render wins over the default
            pending = self.selection.current()
            default = pending if pending is not None else self.default_selection
            self.selection = SelectionState.initial(n, default)
            self._initialized = True
        elif self._initialized:
            self.selection.bind(n)

    def layout(self, dataset: Dataset) -> ChartLayout:
        """
        Compute geometry for `dataset` with the current selection.

        Raises:
            DimensionMismatch: On dataset shape disagreement.
            IndexOutOfRange: If the default selection, or an index passed to select()
                before the first render, does not fit the dataset.
        """
        validate_dataset(dataset)
        self._sync_selection(dataset)
        return compute_layout(
            dataset,
            self.config,
            selected_index=self.selection.current() if self._initialized else None,
            format_y_label=self.format_y_label,
            format_x_label=self.format_x_label,
        )

    def render(
        self,
        dataset: Dataset,
        surface: DrawingSurface,
        *,
        axis_surface: DrawingSurface | None = None,
    ) -> ChartLayout:
        """
        Compute geometry, then paint it with press handlers bound to this chart.

        Returns:
            ChartLayout: The painted layout.
        """
        result = self.layout(dataset)
        draw(result, surface, on_press=self.press, axis_surface=axis_surface)
        return result

    def press(self, target: PressTarget) -> None:
        """
        Route a press on a bar, category label or arrow.

        Raises:
            IndexOutOfRange: If the target index is outside the bound category range.
        """
        logger.debug("press %s", target.payload())
        dispatch_press(
            target,
            self.selection,
            on_data_point_click=self.on_data_point_click,
            on_arrow_click=self.on_arrow_click,
        )

    def select(self, index: int) -> int:
        """
        Programmatic selection (same validation as a press).

        Before the first render the index cannot be range-checked yet; it replaces
        the default selection and is validated by the next layout().
        """
        return self.selection.select(index)
