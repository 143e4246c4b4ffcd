from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from luvatrix_sparkline.raster.canvas import RGBA, blend_mask, disc_mask, polygon_mask


MITER_LIMIT = 4.0


def draw_polyline(
    dst: np.ndarray,
    vertices: Sequence[tuple[float, float]],
    color: RGBA,
    width: float = 1.0,
    *,
    cap: str = "round",
    join: str = "round",
) -> None:
    mask = stroke_mask(dst.shape[0], dst.shape[1], vertices, width, cap=cap, join=join)
    blend_mask(dst, mask, color)


def stroke_mask(
    height: int,
    width: int,
    vertices: Sequence[tuple[float, float]],
    line_width: float,
    *,
    cap: str = "round",
    join: str = "round",
) -> np.ndarray:
    """Coverage of a thick polyline: one quad per segment plus caps and joins."""
    mask = np.zeros((height, width), dtype=bool)
    if not vertices or line_width <= 0:
        return mask
    hw = line_width / 2.0

    for (x0, y0), (x1, y1) in zip(vertices[:-1], vertices[1:], strict=False):
        normal = _unit_normal(x0, y0, x1, y1)
        if normal is None:
            continue
        nx, ny = normal[0] * hw, normal[1] * hw
        quad = ((x0 + nx, y0 + ny), (x1 + nx, y1 + ny), (x1 - nx, y1 - ny), (x0 - nx, y0 - ny))
        mask |= polygon_mask(height, width, quad)

    if cap == "round":
        for x, y in (vertices[0], vertices[-1]):
            mask |= disc_mask(height, width, x, y, hw)

    for a, v, b in zip(vertices[:-2], vertices[1:-1], vertices[2:], strict=False):
        if join == "round":
            mask |= disc_mask(height, width, v[0], v[1], hw)
        else:
            corner = _miter_join(a, v, b, hw)
            if corner:
                mask |= polygon_mask(height, width, corner)
    return mask


def _unit_normal(x0: float, y0: float, x1: float, y1: float) -> tuple[float, float] | None:
    dx = x1 - x0
    dy = y1 - y0
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    return (-dy / length, dx / length)


def _miter_join(
    a: tuple[float, float],
    v: tuple[float, float],
    b: tuple[float, float],
    hw: float,
) -> tuple[tuple[float, float], ...]:
    n1 = _unit_normal(a[0], a[1], v[0], v[1])
    n2 = _unit_normal(v[0], v[1], b[0], b[1])
    if n1 is None or n2 is None:
        return ()
    d1 = (n1[1], -n1[0])
    d2 = (n2[1], -n2[0])
    # outer corner is on the side opposite the turn
    cross = d1[0] * d2[1] - d1[1] * d2[0]
    if cross == 0:
        return ()
    side = -1.0 if cross > 0 else 1.0
    o1 = (v[0] + side * hw * n1[0], v[1] + side * hw * n1[1])
    o2 = (v[0] + side * hw * n2[0], v[1] + side * hw * n2[1])

    mx = n1[0] + n2[0]
    my = n1[1] + n2[1]
    m_len = math.hypot(mx, my)
    cos_half = m_len / 2.0
    if m_len == 0 or 1.0 / cos_half > MITER_LIMIT:
        return (v, o1, o2)
    reach = hw / cos_half
    tip = (v[0] + side * reach * mx / m_len, v[1] + side * reach * my / m_len)
    return (v, o1, tip, o2)
