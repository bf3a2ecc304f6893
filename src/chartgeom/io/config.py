"""
Configuration for chartgeom.

Defines ChartSettings, a frozen dataclass carrying rendering defaults that are stable
across render calls (paddings, tick count, bar sizing, colors, logging). Per-call
values (width, height, visible_width, selection) are supplied when building a
ChartGeometryConfig via ChartSettings.to_config().

Source of truth
- chartgeom.core.constants for numeric defaults.
- chartgeom.core.schema.ChartGeometryConfig for validation of the final config.

Import DAG discipline
- Depends only on stdlib, pydantic (through core) and chartgeom.core.

Notes
- Precedence: env > TOML > defaults.
- Invalid individual overrides are ignored with a warning; the previous value stays.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chartgeom.core.constants import (
    BAR_PITCH_CONSTANT,
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_PADDING_RIGHT,
    DEFAULT_PADDING_TOP,
    DEFAULT_TICK_COUNT,
    STACKING_COMPACTION,
)
from chartgeom.core.schema import ChartGeometryConfig

from .errors import IoConfigError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUE = {"1", "true", "t", "yes", "y", "on"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in _TRUE
    raise TypeError(f"cannot interpret {v!r} as bool")


def _opt_str(v: Any) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _log_level(v: Any) -> str:
    s = str(v).strip().upper()
    if s not in _LOG_LEVELS:
        raise ValueError(f"unknown log level {v!r}")
    return s


@dataclass(frozen=True)
class ChartSettings:
    """
    Rendering defaults for chartgeom.

    Attributes:
        padding_top (float): Offset of the plot band from the top edge.
        padding_right (float): Width of the value-axis gutter.
        count (int): Value-axis tick intervals.
        decimal_places (int): Precision of value-axis labels.
        bar_percentage (float): Bar width multiplier (bounded layouts).
        bar_radius (float): Corner radius of the top segment.
        stacking_compaction (float): Bar x factor when stacking is active.
        pitch_constant (float): Bounded pitch constant.
        percentile (bool): Normalize every category against 100.
        hide_legend (bool): Suppress per-segment value labels.
        color (str): Base color for gridlines and labels.
        label_color (str | None): Label color override.
        accent_color (str): Selected-label underline and arrow fill.
        log_level (str): Level used by the CLI when configuring logging.

    Examples:
        >>> from chartgeom.io import ChartSettings
        >>> ChartSettings(count=5).to_config(width=400, height=200).count
        5
    """

    padding_top: float = DEFAULT_PADDING_TOP
    padding_right: float = DEFAULT_PADDING_RIGHT
    count: int = DEFAULT_TICK_COUNT
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    bar_percentage: float = 1.0
    bar_radius: float = 0.0
    stacking_compaction: float = STACKING_COMPACTION
    pitch_constant: float = BAR_PITCH_CONSTANT
    percentile: bool = False
    hide_legend: bool = False
    color: str = "#000000"
    label_color: str | None = None
    accent_color: str = "#99e5ea"
    log_level: str = "WARNING"

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _coercers(cls) -> dict[str, Any]:
        return {
            "padding_top": float,
            "padding_right": float,
            "count": int,
            "decimal_places": int,
            "bar_percentage": float,
            "bar_radius": float,
            "stacking_compaction": float,
            "pitch_constant": float,
            "percentile": _bool,
            "hide_legend": _bool,
            "color": str,
            "label_color": _opt_str,
            "accent_color": str,
            "log_level": _log_level,
        }

    @classmethod
    def _apply_mapping(cls, base: ChartSettings, cfg: dict[str, Any] | None) -> ChartSettings:
        """Apply a loose config mapping onto ChartSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base
        s = base
        for name, coerce in cls._coercers().items():
            if name not in cfg:
                continue
            try:
                s = replace(s, **{name: coerce(cfg[name])})
            except (TypeError, ValueError) as exc:
                logger.warning("ignoring invalid setting %s=%r: %s", name, cfg[name], exc)
        return s

    @classmethod
    def from_env(cls, base: ChartSettings | None = None, prefix: str = "CHARTGEOM_") -> ChartSettings:
        """
        Build ChartSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables are the upper-cased field names with the prefix, e.g.
        CHARTGEOM_PADDING_TOP, CHARTGEOM_COUNT, CHARTGEOM_PERCENTILE (1/0/true/false/yes/no),
        CHARTGEOM_LABEL_COLOR, CHARTGEOM_LOG_LEVEL.
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for f in fields(cls):
            v = os.getenv(prefix + f.name.upper())
            if v:
                mapping[f.name] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ChartSettings:
        """
        Build ChartSettings from a TOML file.

        Search order when `path` is None:
            1) ./chartgeom.toml (with either a top-level [chart] table or direct keys)
            2) ./pyproject.toml under [tool.chartgeom]

        Returns defaults if no file is present.

        Raises:
            IoConfigError: If an explicitly given file is not valid TOML.
        """
        s = cls()
        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "chartgeom.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                if path is not None:
                    raise IoConfigError(f"invalid TOML in {p}: {exc}") from exc
                logger.warning("skipping unreadable config %s: %s", p, exc)
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("chartgeom") if isinstance(tool, dict) else None
            else:
                chart = data.get("chart")
                cfg = chart if isinstance(chart, dict) else data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ChartSettings:
        """
        Load ChartSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (chartgeom.toml,
                pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

    def to_config(self, width: float, height: float, **overrides: Any) -> ChartGeometryConfig:
        """
        Build a validated ChartGeometryConfig from these settings.

        Args:
            width (float): Chart width.
            height (float): Chart height.
            **overrides: Any ChartGeometryConfig field (e.g. visible_width,
                hide_points_at_index, from_zero); None values are dropped.

        Raises:
            IoConfigError: If the combined values do not form a valid config.
        """
        values: dict[str, Any] = {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "log_level"
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return ChartGeometryConfig(width=width, height=height, **values)
        except ValidationError as exc:
            raise IoConfigError(f"invalid chart configuration: {exc}") from exc
