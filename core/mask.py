from typing import Tuple

import numpy as np

from .region import Region
from .separable_blur import separable_gaussian_blur


def expand_region(region: Region, canvas_w: int, canvas_h: int) -> Tuple[float, float, float, float]:
    """Pad a face box so the ellipse also covers forehead, chin and neck.

    Vertical padding is 1.5x above and 2.5x below in total, which pulls the
    ellipse downwards.
    """
    pad_x = region.width * 0.2
    pad_y = region.height * 0.2
    fx = max(0.0, region.x - pad_x)
    fy = max(0.0, region.y - pad_y * 1.5)
    fw = min(canvas_w - fx, region.width + pad_x * 2)
    fh = min(canvas_h - fy, region.height + pad_y * 2.5)
    return fx, fy, fw, fh


def ellipse_mask(region: Region, width: int, height: int) -> np.ndarray:
    mask = np.zeros((height, width), dtype=np.uint8)
    fx, fy, fw, fh = expand_region(region, width, height)
    if fw <= 0 or fh <= 0:
        return mask

    cx, cy = fx + fw / 2, fy + fh / 2
    rx, ry = fw / 2, fh / 2
    cols = (np.arange(width, dtype=np.float64) + 0.5 - cx) / rx
    rows = (np.arange(height, dtype=np.float64) + 0.5 - cy) / ry
    inside = rows[:, None] ** 2 + cols[None, :] ** 2 <= 1.0
    mask[inside] = 255
    return mask


def feather_mask(mask: np.ndarray, radius: float) -> np.ndarray:
    return separable_gaussian_blur(mask, radius)
