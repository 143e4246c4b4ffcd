from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from luvatrix_sparkline.geometry import FillPaint, Point, PointPaint, RegionSize, StrokePaint
from luvatrix_sparkline.raster.canvas import RGBA, new_canvas
from luvatrix_sparkline.raster.draw_fill import fill_polygon
from luvatrix_sparkline.raster.draw_lines import draw_polyline
from luvatrix_sparkline.raster.draw_markers import draw_markers


class RasterSurface:
    """Drawing surface backed by an HxWx4 uint8 RGBA array."""

    def __init__(self, width: int, height: int, background: RGBA = (0, 0, 0, 0)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("raster surface width/height must be > 0")
        self.width = width
        self.height = height
        self.canvas = new_canvas(width, height, color=background)

    @classmethod
    def for_region(cls, region: RegionSize, background: RGBA = (0, 0, 0, 0)) -> "RasterSurface":
        return cls(max(1, int(math.ceil(region.width))), max(1, int(math.ceil(region.height))), background)

    def fill_path(self, vertices: Sequence[Point], paint: FillPaint) -> None:
        fill_polygon(self.canvas, vertices, paint.color)

    def stroke_path(self, vertices: Sequence[Point], paint: StrokePaint) -> None:
        draw_polyline(self.canvas, vertices, paint.color, paint.width, cap=paint.cap, join=paint.join)

    def draw_points(self, points: Sequence[Point], paint: PointPaint) -> None:
        draw_markers(self.canvas, points, paint.color, size=paint.size)

    def to_array(self) -> np.ndarray:
        return self.canvas.copy()
