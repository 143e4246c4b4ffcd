from __future__ import annotations

from typing import Sequence
import xml.etree.ElementTree as ET

from luvatrix_sparkline.geometry import FillPaint, Point, PointPaint, RegionSize, StrokePaint
from luvatrix_sparkline.style import RGBA


SVG_NS = "http://www.w3.org/2000/svg"


class SvgSurface:
    """Drawing surface that records primitives as SVG elements."""

    def __init__(self, region: RegionSize, background: RGBA | None = None) -> None:
        self.region = region
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": _num(region.width),
                "height": _num(region.height),
                "viewBox": f"0 0 {_num(region.width)} {_num(region.height)}",
            },
        )
        if background is not None and background[3] > 0:
            rect = ET.SubElement(
                self.root,
                "rect",
                {"x": "0", "y": "0", "width": _num(region.width), "height": _num(region.height)},
            )
            _apply_color(rect, "fill", background)

    def fill_path(self, vertices: Sequence[Point], paint: FillPaint) -> None:
        elem = ET.SubElement(self.root, "path", {"d": path_data(vertices, closed=True), "stroke": "none"})
        _apply_color(elem, "fill", paint.color)

    def stroke_path(self, vertices: Sequence[Point], paint: StrokePaint) -> None:
        elem = ET.SubElement(
            self.root,
            "path",
            {
                "d": path_data(vertices),
                "fill": "none",
                "stroke-width": _num(paint.width),
                "stroke-linecap": paint.cap,
                "stroke-linejoin": paint.join,
            },
        )
        _apply_color(elem, "stroke", paint.color)

    def draw_points(self, points: Sequence[Point], paint: PointPaint) -> None:
        for x, y in points:
            elem = ET.SubElement(self.root, "circle", {"cx": _num(x), "cy": _num(y), "r": _num(paint.size / 2.0)})
            _apply_color(elem, "fill", paint.color)

    def to_markup(self) -> str:
        return ET.tostring(self.root, encoding="unicode")


def path_data(vertices: Sequence[Point], *, closed: bool = False) -> str:
    if not vertices:
        return ""
    first, *rest = vertices
    # A lone moveto draws nothing; a zero-length lineto lets round caps show the point.
    if not rest:
        rest = [first]
    parts = [f"M{_num(first[0])},{_num(first[1])}"]
    parts.extend(f"L{_num(x)},{_num(y)}" for x, y in rest)
    if closed:
        parts.append("Z")
    return " ".join(parts)


def _apply_color(elem: ET.Element, attr: str, color: RGBA) -> None:
    r, g, b, a = color
    elem.set(attr, f"#{r:02x}{g:02x}{b:02x}")
    if a < 255:
        elem.set(f"{attr}-opacity", _num(a / 255.0))


def _num(value: float) -> str:
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
