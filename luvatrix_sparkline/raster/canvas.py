from __future__ import annotations

from typing import Sequence

import numpy as np

from luvatrix_sparkline.style import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def blend_mask(dst: np.ndarray, mask: np.ndarray, color: RGBA) -> None:
    """Source-over composite `color` wherever `mask` is set."""
    if not np.any(mask):
        return
    a = color[3] / 255.0
    if a <= 0.0:
        return
    inv = 1.0 - a
    view = dst[mask].astype(np.float32)
    src = np.asarray(color[0:3], dtype=np.float32)
    dst_a = view[:, 3:4] / 255.0
    out_a = a + dst_a * inv
    safe = np.where(out_a > 0.0, out_a, 1.0)
    view[:, :3] = (src * a + view[:, :3] * dst_a * inv) / safe
    view[:, 3:4] = out_a * 255.0
    dst[mask] = np.clip(np.rint(view), 0, 255).astype(np.uint8)


def polygon_mask(height: int, width: int, vertices: Sequence[tuple[float, float]]) -> np.ndarray:
    """Pixels whose centers fall inside the polygon (even-odd rule)."""
    mask = np.zeros((height, width), dtype=bool)
    pts = np.asarray(vertices, dtype=np.float64).reshape(-1, 2)
    if pts.shape[0] < 3:
        return mask

    x0 = max(0, int(np.floor(pts[:, 0].min())))
    x1 = min(width, int(np.ceil(pts[:, 0].max())) + 1)
    y0 = max(0, int(np.floor(pts[:, 1].min())))
    y1 = min(height, int(np.ceil(pts[:, 1].max())) + 1)
    if x0 >= x1 or y0 >= y1:
        return mask

    gx, gy = np.meshgrid(np.arange(x0, x1) + 0.5, np.arange(y0, y1) + 0.5)
    inside = np.zeros(gx.shape, dtype=bool)
    xa = pts[:, 0]
    ya = pts[:, 1]
    xb = np.roll(xa, -1)
    yb = np.roll(ya, -1)
    for ax, ay, bx, by in zip(xa.tolist(), ya.tolist(), xb.tolist(), yb.tolist(), strict=False):
        if ay == by:
            continue
        crosses = (ay > gy) != (by > gy)
        x_at = ax + (gy - ay) * (bx - ax) / (by - ay)
        inside ^= crosses & (gx < x_at)
    mask[y0:y1, x0:x1] = inside
    return mask


def disc_mask(height: int, width: int, cx: float, cy: float, radius: float) -> np.ndarray:
    mask = np.zeros((height, width), dtype=bool)
    if radius <= 0:
        return mask
    x0 = max(0, int(np.floor(cx - radius)))
    x1 = min(width, int(np.ceil(cx + radius)) + 1)
    y0 = max(0, int(np.floor(cy - radius)))
    y1 = min(height, int(np.ceil(cy + radius)) + 1)
    if x0 >= x1 or y0 >= y1:
        return mask
    gx, gy = np.meshgrid(np.arange(x0, x1) + 0.5, np.arange(y0, y1) + 0.5)
    mask[y0:y1, x0:x1] = (gx - cx) ** 2 + (gy - cy) ** 2 <= radius * radius
    return mask
