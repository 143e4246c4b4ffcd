from __future__ import annotations

import argparse
import math
from pathlib import Path

from luvatrix_sparkline import FillMode, PointsMode, SparklineStyle, save_sparkline


VARIANTS: dict[str, SparklineStyle] = {
    "plain": SparklineStyle(),
    "fill_below": SparklineStyle(fill_mode=FillMode.BELOW),
    "fill_above": SparklineStyle(fill_mode=FillMode.ABOVE, line_color=(244, 67, 54, 255), fill_color=(255, 205, 210, 255)),
    "sharp_points": SparklineStyle(sharp_corners=True, points_mode=PointsMode.ALL, line_width=3.0),
    "last_point": SparklineStyle(points_mode=PointsMode.LAST, point_size=8.0),
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Write one sparkline per style variant.")
    parser.add_argument("--out-dir", type=Path, default=Path("sparkline_gallery"))
    parser.add_argument("--format", choices=["png", "svg"], default="png")
    parser.add_argument("--samples", type=int, default=48)
    args = parser.parse_args()

    data = [math.sin(i / 4.0) * 10.0 + (i % 7) for i in range(args.samples)]
    args.out_dir.mkdir(parents=True, exist_ok=True)
    for name, style in VARIANTS.items():
        path = args.out_dir / f"{name}.{args.format}"
        save_sparkline(data, path, 240, 60, style)
        print(f"wrote {path}")


if __name__ == "__main__":
    main()
