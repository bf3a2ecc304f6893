from __future__ import annotations

from pathlib import Path

import pytest

from chartgeom.io.config import ChartSettings
from chartgeom.io.errors import IoConfigError

_ENV_KEYS = [
    "CHARTGEOM_COUNT",
    "CHARTGEOM_PADDING_TOP",
    "CHARTGEOM_PERCENTILE",
    "CHARTGEOM_LABEL_COLOR",
    "CHARTGEOM_LOG_LEVEL",
]


def _write_chartgeom_toml(tmp: Path, content: str) -> Path:
    p = tmp / "chartgeom.toml"
    p.write_text(content)
    return p


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    _write_chartgeom_toml(
        tmp_path,
        """
        [chart]
        count = 5
        padding_top = 20
        percentile = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("CHARTGEOM_COUNT", "8")
    monkeypatch.setenv("CHARTGEOM_PERCENTILE", "yes")

    s = ChartSettings.load()

    assert s.count == 8  # env override
    assert s.percentile is True  # env override
    assert s.padding_top == 20.0  # from TOML


def test_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write_chartgeom_toml(
        tmp_path,
        """
        count = 6
        label_color = "#333333"
        log_level = "debug"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = ChartSettings.load()

    assert s.count == 6
    assert s.label_color == "#333333"
    assert s.log_level == "DEBUG"


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [tool.chartgeom]
        decimal_places = 0
        bar_radius = 4
        """.strip()
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = ChartSettings.load()

    assert s.decimal_places == 0
    assert s.bar_radius == 4.0


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = ChartSettings.load()

    assert s == ChartSettings()
    assert s.count == 4
    assert s.padding_top == 15
    assert s.log_level == "WARNING"


def test_invalid_values_are_ignored(tmp_path: Path, monkeypatch) -> None:
    _write_chartgeom_toml(tmp_path, 'count = "many"\nlog_level = "LOUD"\n')
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = ChartSettings.load()

    assert s.count == 4
    assert s.log_level == "WARNING"


def test_explicit_path_with_bad_toml_raises(tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("count = [\n")
    with pytest.raises(IoConfigError):
        ChartSettings.from_toml(bad)


def test_to_config_applies_settings_and_overrides() -> None:
    s = ChartSettings(count=5, percentile=True, label_color="#444444")
    cfg = s.to_config(400, 200, visible_width=240, hide_points_at_index=[1], from_number=None)
    assert cfg.count == 5
    assert cfg.percentile is True
    assert cfg.effective_label_color == "#444444"
    assert cfg.visible_width == 240
    assert cfg.hide_points_at_index == frozenset({1})
    assert cfg.from_number is None


def test_to_config_wraps_validation_errors() -> None:
    with pytest.raises(IoConfigError):
        ChartSettings().to_config(400, 200, visible_width=800)
