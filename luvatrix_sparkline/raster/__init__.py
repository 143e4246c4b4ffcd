from .canvas import blend_mask, disc_mask, new_canvas, polygon_mask
from .draw_fill import fill_polygon
from .draw_lines import draw_polyline, stroke_mask
from .draw_markers import draw_markers
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_mask",
    "disc_mask",
    "draw_markers",
    "draw_polyline",
    "fill_polygon",
    "new_canvas",
    "polygon_mask",
    "stroke_mask",
]
