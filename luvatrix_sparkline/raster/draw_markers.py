from __future__ import annotations

from typing import Sequence

import numpy as np

from luvatrix_sparkline.raster.canvas import RGBA, blend_mask, disc_mask


def draw_markers(dst: np.ndarray, points: Sequence[tuple[float, float]], color: RGBA, size: float = 1.0) -> None:
    radius = size / 2.0
    mask = np.zeros(dst.shape[:2], dtype=bool)
    for x, y in points:
        mask |= disc_mask(dst.shape[0], dst.shape[1], x, y, radius)
    blend_mask(dst, mask, color)
