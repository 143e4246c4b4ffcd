from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Literal

import numpy as np

from luvatrix_sparkline.adapters import coerce_samples
from luvatrix_sparkline.errors import InvalidInputError
from luvatrix_sparkline.style import RGBA, FillMode, PointsMode, SparklineStyle


LOGGER = logging.getLogger(__name__)

Point = tuple[float, float]
StrokeCap = Literal["round", "butt"]
StrokeJoin = Literal["round", "miter"]


@dataclass(frozen=True)
class RegionSize:
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidInputError(f"region {name} must be finite, got {value!r}")
            if value < 0:
                raise InvalidInputError(f"region {name} must be >= 0, got {value!r}")


@dataclass(frozen=True)
class SampleLimits:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class VertexPath:
    vertices: tuple[Point, ...]
    closed: bool = False

    def xs(self) -> np.ndarray:
        return np.asarray([p[0] for p in self.vertices], dtype=np.float64)

    def ys(self) -> np.ndarray:
        return np.asarray([p[1] for p in self.vertices], dtype=np.float64)


@dataclass(frozen=True)
class StrokePaint:
    width: float
    color: RGBA
    cap: StrokeCap = "round"
    join: StrokeJoin = "round"


@dataclass(frozen=True)
class FillPaint:
    color: RGBA


@dataclass(frozen=True)
class PointPaint:
    size: float
    color: RGBA
    cap: StrokeCap = "round"


@dataclass(frozen=True)
class SparklineGeometry:
    """Drawable primitives for one sparkline, in region pixel coordinates."""

    region: RegionSize
    limits: SampleLimits
    stroke: VertexPath
    stroke_paint: StrokePaint
    fill: VertexPath | None
    fill_paint: FillPaint | None
    markers: tuple[Point, ...]
    point_paint: PointPaint
    degenerate: bool = False


def compute_limits(samples: np.ndarray) -> SampleLimits:
    return SampleLimits(min=float(np.min(samples)), max=float(np.max(samples)))


def render(
    samples: Any,
    region: RegionSize | tuple[float, float],
    style: SparklineStyle,
    *,
    limits: SampleLimits | None = None,
) -> SparklineGeometry:
    """Normalize `samples` into `region` and build stroke, fill and marker primitives.

    The stroke is inset by half its width on every side so it is never clipped.
    Flat data (all samples equal) has no vertical extent and is placed on the
    bottom of the inset band. A single sample yields one vertex at
    `x = line_width / 2` and no fill.
    """

    values = coerce_samples(samples)
    if not isinstance(region, RegionSize):
        region = RegionSize(float(region[0]), float(region[1]))
    if not isinstance(style, SparklineStyle):
        raise InvalidInputError(f"style must be a SparklineStyle, got {type(style)!r}")
    if limits is None:
        limits = compute_limits(values)

    lw = style.line_width
    half = lw / 2.0
    width = max(0.0, region.width - lw)
    height = max(0.0, region.height - lw)
    count = int(values.size)

    if not (math.isfinite(limits.min) and math.isfinite(limits.max)):
        raise InvalidInputError(f"sample limits must be finite, got {limits!r}")
    lo, hi, scaled = limits.min, limits.max, values
    if not math.isfinite(limits.span):
        # span overflows float64; the normalized position is scale invariant
        lo, hi, scaled = lo / 2.0, hi / 2.0, values / 2.0
    span = hi - lo

    step = width / (count - 1) if count > 1 else 0.0
    degenerate = span == 0
    if degenerate:
        LOGGER.debug("flat sparkline data (value=%s); placing line on the bottom edge", limits.min)
        fraction = np.zeros(count, dtype=np.float64)
    else:
        fraction = (scaled - lo) / span

    xs = np.arange(count, dtype=np.float64) * step + half
    ys = np.clip(height - fraction * height + half, half, height + half)
    vertices = tuple(zip(xs.tolist(), ys.tolist()))
    stroke = VertexPath(vertices=vertices)

    fill: VertexPath | None = None
    fill_paint: FillPaint | None = None
    if style.fill_mode != FillMode.NONE:
        if count < 2:
            LOGGER.debug("skipping %s fill for a single-sample sparkline", style.fill_mode.value)
        else:
            fill = _build_fill_path(vertices, region, style.fill_mode, half)
            fill_paint = FillPaint(color=style.fill_color)

    return SparklineGeometry(
        region=region,
        limits=limits,
        stroke=stroke,
        stroke_paint=StrokePaint(
            width=lw,
            color=style.line_color,
            cap="round",
            join="miter" if style.sharp_corners else "round",
        ),
        fill=fill,
        fill_paint=fill_paint,
        markers=_select_markers(vertices, style.points_mode),
        point_paint=PointPaint(size=style.point_size, color=style.point_color),
        degenerate=degenerate,
    )


def _build_fill_path(vertices: tuple[Point, ...], region: RegionSize, mode: FillMode, half: float) -> VertexPath:
    edge = region.height if mode == FillMode.BELOW else 0.0
    first_x, first_y = vertices[0]
    last_x, last_y = vertices[-1]
    outline = vertices + (
        (last_x + half, last_y),
        (region.width, edge),
        (0.0, edge),
        (first_x - half, first_y),
    )
    return VertexPath(vertices=outline, closed=True)


def _select_markers(vertices: tuple[Point, ...], mode: PointsMode) -> tuple[Point, ...]:
    if mode == PointsMode.ALL:
        return vertices
    if mode == PointsMode.LAST:
        return (vertices[-1],)
    return ()
