from __future__ import annotations

import json
from pathlib import Path

import pytest

from chartgeom.cli import main


def _write_dataset(tmp: Path) -> Path:
    p = tmp / "data.json"
    p.write_text(
        json.dumps(
            {"labels": ["A", "B"], "data": [[60, 60], [30, 30]], "barColors": ["#111111", "#222222"]}
        )
    )
    return p


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as ei:
        main(argv)
    return int(ei.value.code)


def test_layout_writes_json_and_vega(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    data = _write_dataset(tmp_path)
    out = tmp_path / "out" / "layout.json"
    vega = tmp_path / "out" / "chart.vl.json"

    code = _run(["layout", str(data), "--width", "400", "--height", "200", "--out", str(out), "--vega-out", str(vega)])

    assert code == 0
    payload = json.loads(out.read_text())
    assert payload["border"] == 120.0
    assert [s["height"] for s in payload["bars"][0]["segments"]] == [75.0, 75.0]
    assert "layer" in json.loads(vega.read_text())
    assert "[INFO] Wrote layout to" in capsys.readouterr().out


def test_layout_summary_with_percentile(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    data = _write_dataset(tmp_path)

    code = _run(["layout", str(data), "--percentile", "--segments", "2"])

    assert code == 0
    out = capsys.readouterr().out
    assert "border=100" in out
    assert "[0.0, 50.0, 100.0]" in out


def test_show_prints_segment_table(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    data = _write_dataset(tmp_path)

    code = _run(["show", str(data), "--width", "400", "--height", "200"])

    assert code == 0
    assert "bar:0:0" in capsys.readouterr().out


def test_errors_exit_nonzero(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    assert _run(["layout", str(tmp_path / "missing.json")]) == 1
    assert "[ERROR]" in capsys.readouterr().err
    assert _run(["nope"]) == 2


def test_no_arguments_prints_help(capsys) -> None:
    main([])
    assert "chartgeom" in capsys.readouterr().out
