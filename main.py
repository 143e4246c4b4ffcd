from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

from luvatrix_sparkline import (
    DEFAULT_STYLE,
    FillMode,
    PointsMode,
    SparklineStyle,
    load_style,
    parse_color,
    save_sparkline,
)
from luvatrix_sparkline.errors import InvalidInputError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="luvatrix-sparkline")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a sparkline to a .png or .svg file.")
    source = render.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", type=str, help="Comma-separated samples, e.g. 1,4,2.5")
    source.add_argument("--data-file", type=Path, help="JSON list of numbers, or one number per line.")
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--width", type=float, default=None, help="Default: style fallback_width.")
    render.add_argument("--height", type=float, default=None, help="Default: style fallback_height.")
    render.add_argument("--style", type=Path, default=None, help="JSON object of style overrides.")
    render.add_argument("--line-width", type=float, default=None)
    render.add_argument("--sharp-corners", action="store_true")
    render.add_argument("--fill", choices=[m.value for m in FillMode], default=None)
    render.add_argument("--points", choices=[m.value for m in PointsMode], default=None)
    render.add_argument("--background", type=str, default="#00000000", help="Hex color, default transparent.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        samples = _load_samples(args.data, args.data_file)
        style = _build_style(args)
        geometry = save_sparkline(
            samples,
            args.out,
            width=args.width,
            height=args.height,
            style=style,
            background=parse_color(args.background, label="background"),
        )
        print(
            f"render complete: out={args.out} samples={len(geometry.stroke.vertices)} "
            f"size={geometry.region.width:g}x{geometry.region.height:g} "
            f"min={geometry.limits.min:g} max={geometry.limits.max:g} "
            f"fill={'yes' if geometry.fill is not None else 'no'} markers={len(geometry.markers)}"
        )
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _load_samples(data: str | None, data_file: Path | None) -> list[float]:
    if data is not None:
        return _parse_numbers(data.split(","), label="--data")
    if data_file is None:
        raise RuntimeError("one of --data/--data-file is required")
    text = data_file.read_text(encoding="utf-8").strip()
    if text.startswith("["):
        payload = json.loads(text)
        if not isinstance(payload, list):
            raise InvalidInputError(f"{data_file} must contain a JSON list")
        return _parse_numbers(payload, label=str(data_file))
    return _parse_numbers(text.splitlines(), label=str(data_file))


def _parse_numbers(raw: list[Any], *, label: str) -> list[float]:
    out: list[float] = []
    for i, item in enumerate(raw):
        if isinstance(item, str):
            item = item.strip()
            if not item:
                continue
        try:
            out.append(float(item))
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"{label}: not a number at position {i}: {item!r}") from exc
    return out


def _build_style(args: argparse.Namespace) -> SparklineStyle:
    style = load_style(args.style) if args.style is not None else DEFAULT_STYLE
    changes: dict[str, Any] = {}
    if args.line_width is not None:
        changes["line_width"] = args.line_width
    if args.sharp_corners:
        changes["sharp_corners"] = True
    if args.fill is not None:
        changes["fill_mode"] = FillMode(args.fill)
    if args.points is not None:
        changes["points_mode"] = PointsMode(args.points)
    return replace(style, **changes)


if __name__ == "__main__":
    main()
