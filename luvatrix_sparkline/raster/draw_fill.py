from __future__ import annotations

from typing import Sequence

import numpy as np

from luvatrix_sparkline.raster.canvas import RGBA, blend_mask, polygon_mask


def fill_polygon(dst: np.ndarray, vertices: Sequence[tuple[float, float]], color: RGBA) -> None:
    blend_mask(dst, polygon_mask(dst.shape[0], dst.shape[1], vertices), color)
