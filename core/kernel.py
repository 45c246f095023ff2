import math

import numpy as np


def gaussian_kernel(radius: float) -> np.ndarray:
    """Normalised 1-D Gaussian weights for a blur of ``radius`` pixels.

    sigma = max(1, radius / 2.5) and the support is ceil(3 * sigma) on each
    side, so any radius (zero or negative included) yields a valid kernel.
    """
    sigma = max(1.0, radius / 2.5)
    half = math.ceil(sigma * 3)
    x = np.arange(-half, half + 1, dtype=np.float64)
    kernel = np.exp(-(x * x) / (2 * sigma * sigma))
    return kernel / kernel.sum()
