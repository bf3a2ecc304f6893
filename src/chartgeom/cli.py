"""
chartgeom command line.

Commands:
    layout   Compute a stacked-bar layout from a dataset file and write layout JSON
             and/or a Vega-Lite spec.
    show     Print the bar segments of a dataset as a table.

Usage:
    chartgeom layout data.json --width 400 --height 200 --out out/layout.json
    chartgeom layout data.csv --colors "#111,#222" --visible-width 240 --vega-out out/chart.vl.json
    chartgeom show data.json --width 400 --height 200 --percentile
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .core.errors import ChartGeomError
from .core.schema import ChartGeometryConfig, Dataset
from .io.config import ChartSettings
from .io.errors import IoError
from .io.read import read_dataset
from .io.write import layout_to_frame, write_json_atomic, write_layout_json
from .layout.engine import compute_layout
from .viz.altair_surface import AltairSurface
from .viz.surface import draw


def _split_csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("data", type=str, help="Dataset file (.json, .csv, .parquet).")
    p.add_argument("--width", type=float, default=400, help="Chart width in pixels.")
    p.add_argument("--height", type=float, default=220, help="Chart height in pixels.")
    p.add_argument("--config", type=str, default=None, help="TOML settings file.")
    p.add_argument("--colors", type=str, default="", help="Comma-separated segment colors.")
    p.add_argument("--legend", type=str, default=None, help="Comma-separated legend entries.")
    p.add_argument("--label-col", type=str, default="label", help="Label column (tabular inputs).")
    p.add_argument("--percentile", action="store_true", help="Normalize every category to 100.")
    p.add_argument("--segments", type=int, default=None, help="Value-axis tick intervals.")
    p.add_argument("--visible-width", type=float, default=None, help="Scroll window width.")
    p.add_argument(
        "--hide-index",
        type=str,
        default="",
        help="Comma-separated category indices without a label.",
    )


def _load(args: argparse.Namespace) -> tuple[Dataset, ChartGeometryConfig, ChartSettings]:
    settings = ChartSettings.load(args.config)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    dataset = read_dataset(
        args.data,
        label_col=args.label_col,
        bar_colors=_split_csv(args.colors),
        legend=_split_csv(args.legend) if args.legend is not None else None,
    )
    config = settings.to_config(
        args.width,
        args.height,
        percentile=True if args.percentile else None,
        count=args.segments,
        visible_width=args.visible_width,
        hide_points_at_index=[int(i) for i in _split_csv(args.hide_index)] or None,
    )
    return dataset, config, settings


def _cmd_layout(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="chartgeom layout",
        description="Compute stacked-bar geometry and write layout JSON / Vega-Lite.",
    )
    _add_common(p)
    p.add_argument("--out", type=str, default=None, help="Layout JSON output path.")
    p.add_argument("--vega-out", type=str, default=None, help="Vega-Lite JSON output path.")
    p.add_argument("--select", type=int, default=None, help="Highlighted category index.")
    args = p.parse_args(argv)

    dataset, config, _ = _load(args)
    layout = compute_layout(dataset, config, selected_index=args.select)

    if args.out:
        path = write_layout_json(layout, args.out)
        print(f"[INFO] Wrote layout to {path}")
    if args.vega_out:
        vp = layout.viewport
        surface = AltairSurface(
            width=vp.content_width if vp is not None else config.width, height=config.height
        )
        draw(layout, surface)
        path = write_json_atomic(surface.to_dict(), args.vega_out)
        print(f"[INFO] Wrote Vega-Lite spec to {path}")
    if not args.out and not args.vega_out:
        print(
            f"[INFO] {len(layout.bars)} categories, border={layout.border:g}, "
            f"ticks={[round(t, config.decimal_places) for t in layout.tick_values]}"
        )
    return 0


def _cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="chartgeom show", description="Print bar segments as a table.")
    _add_common(p)
    p.add_argument("--n", type=int, default=20, help="Rows to display.")
    args = p.parse_args(argv)

    dataset, config, _ = _load(args)
    layout = compute_layout(dataset, config)
    print(layout_to_frame(layout).head(args.n))
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="chartgeom", description="Stacked bar chart geometry CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("layout")
    sub.add_parser("show")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    try:
        if cmd == "layout":
            code = _cmd_layout(rest)
        elif cmd == "show":
            code = _cmd_show(rest)
        else:
            print(f"Unknown command: {cmd}", file=sys.stderr)
            code = 2
    except (ChartGeomError, IoError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
