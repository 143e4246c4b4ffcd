from luvatrix_sparkline.errors import InvalidInputError, SparklineError
from luvatrix_sparkline.export import render_array, render_svg, save_sparkline
from luvatrix_sparkline.geometry import (
    FillPaint,
    VertexPath,
    PointPaint,
    RegionSize,
    SampleLimits,
    SparklineGeometry,
    StrokePaint,
    compute_limits,
    render,
)
from luvatrix_sparkline.painter import DrawingSurface, SparklinePainter, paint_geometry, resolve_region_size
from luvatrix_sparkline.style import (
    DEFAULT_STYLE,
    FillMode,
    PointsMode,
    SparklineStyle,
    load_style,
    parse_color,
    style_from_overrides,
)

__all__ = [
    "DEFAULT_STYLE",
    "DrawingSurface",
    "FillMode",
    "FillPaint",
    "InvalidInputError",
    "VertexPath",
    "PointPaint",
    "PointsMode",
    "RegionSize",
    "SampleLimits",
    "SparklineError",
    "SparklineGeometry",
    "SparklinePainter",
    "SparklineStyle",
    "StrokePaint",
    "compute_limits",
    "load_style",
    "paint_geometry",
    "parse_color",
    "render",
    "render_array",
    "render_svg",
    "resolve_region_size",
    "save_sparkline",
    "style_from_overrides",
]
