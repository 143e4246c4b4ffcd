from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from luvatrix_sparkline.errors import InvalidInputError
from luvatrix_sparkline.geometry import SparklineGeometry
from luvatrix_sparkline.painter import SparklinePainter, resolve_region_size
from luvatrix_sparkline.raster import RasterSurface
from luvatrix_sparkline.style import DEFAULT_STYLE, RGBA, SparklineStyle
from luvatrix_sparkline.svg import SvgSurface


LOGGER = logging.getLogger(__name__)

TRANSPARENT: RGBA = (0, 0, 0, 0)


def render_array(
    samples: Any,
    width: float | None = None,
    height: float | None = None,
    style: SparklineStyle = DEFAULT_STYLE,
    *,
    background: RGBA = TRANSPARENT,
) -> np.ndarray:
    """Rasterize a sparkline into an HxWx4 uint8 RGBA array.

    Omitted dimensions fall back to the style's fallback size.
    """

    region = resolve_region_size(width, height, style)
    surface = RasterSurface.for_region(region, background=background)
    SparklinePainter(samples, style).paint(surface, region)
    return surface.canvas


def render_svg(
    samples: Any,
    width: float | None = None,
    height: float | None = None,
    style: SparklineStyle = DEFAULT_STYLE,
    *,
    background: RGBA | None = None,
) -> str:
    region = resolve_region_size(width, height, style)
    surface = SvgSurface(region, background=background)
    SparklinePainter(samples, style).paint(surface, region)
    return surface.to_markup()


def save_sparkline(
    samples: Any,
    path: Path,
    width: float | None = None,
    height: float | None = None,
    style: SparklineStyle = DEFAULT_STYLE,
    *,
    background: RGBA = TRANSPARENT,
) -> SparklineGeometry:
    """Write a `.png` or `.svg` sparkline to `path` and return its geometry."""
    path = Path(path)
    suffix = path.suffix.lower()
    region = resolve_region_size(width, height, style)
    painter = SparklinePainter(samples, style)

    if suffix == ".png":
        surface = RasterSurface.for_region(region, background=background)
        geometry = painter.paint(surface, region)
        Image.fromarray(surface.canvas).save(path)
    elif suffix == ".svg":
        svg = SvgSurface(region, background=background)
        geometry = painter.paint(svg, region)
        path.write_text(svg.to_markup() + "\n", encoding="utf-8")
    else:
        raise InvalidInputError(f"unsupported output format: {path.suffix or '(none)'} (expected .png or .svg)")

    LOGGER.info(
        "wrote sparkline %s (%dx%d, %d samples)",
        path,
        int(region.width),
        int(region.height),
        len(geometry.stroke.vertices),
    )
    return geometry
