from __future__ import annotations

import logging
import math
from typing import Any, Protocol, Sequence

import numpy as np

from luvatrix_sparkline.adapters import coerce_samples
from luvatrix_sparkline.geometry import (
    FillPaint,
    Point,
    PointPaint,
    RegionSize,
    SparklineGeometry,
    StrokePaint,
    compute_limits,
    render,
)
from luvatrix_sparkline.style import DEFAULT_STYLE, SparklineStyle


LOGGER = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    """Host canvas interface a sparkline paints onto."""

    def fill_path(self, vertices: Sequence[Point], paint: FillPaint) -> None:
        ...

    def stroke_path(self, vertices: Sequence[Point], paint: StrokePaint) -> None:
        ...

    def draw_points(self, points: Sequence[Point], paint: PointPaint) -> None:
        ...


def resolve_region_size(
    available_width: float | None,
    available_height: float | None,
    style: SparklineStyle = DEFAULT_STYLE,
) -> RegionSize:
    """Turn host layout bounds into a concrete region.

    An unbounded dimension (`None` or `math.inf`) takes the style's fallback size.
    """

    width = style.fallback_width if _unbounded(available_width) else float(available_width)  # type: ignore[arg-type]
    height = style.fallback_height if _unbounded(available_height) else float(available_height)  # type: ignore[arg-type]
    return RegionSize(width=width, height=height)


def _unbounded(value: float | None) -> bool:
    return value is None or value == math.inf


class SparklinePainter:
    """Retained painter for one data set.

    Holds the samples and their min/max so repeated paints at different region
    sizes do not rescan the data.
    """

    def __init__(self, samples: Any, style: SparklineStyle = DEFAULT_STYLE) -> None:
        self.samples = coerce_samples(samples).copy()
        self.style = style
        self.limits = compute_limits(self.samples)

    def layout(self, region: RegionSize | tuple[float, float]) -> SparklineGeometry:
        return render(self.samples, region, self.style, limits=self.limits)

    def paint(self, surface: DrawingSurface, region: RegionSize | tuple[float, float]) -> SparklineGeometry:
        geometry = self.layout(region)
        paint_geometry(surface, geometry)
        return geometry

    def should_repaint(self, old: SparklinePainter) -> bool:
        if not np.array_equal(self.samples, old.samples):
            LOGGER.debug("sparkline data changed (%d -> %d samples)", old.samples.size, self.samples.size)
            return True
        return self.style.paint_key() != old.style.paint_key()


def paint_geometry(surface: DrawingSurface, geometry: SparklineGeometry) -> None:
    """Issue fill, then stroke, then markers."""
    if geometry.fill is not None and geometry.fill_paint is not None:
        surface.fill_path(geometry.fill.vertices, geometry.fill_paint)
    surface.stroke_path(geometry.stroke.vertices, geometry.stroke_paint)
    if geometry.markers:
        surface.draw_points(geometry.markers, geometry.point_paint)
