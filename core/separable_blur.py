import cv2
import numpy as np

from .kernel import gaussian_kernel

# cv2 filters take at most 4 channels per call
_MAX_CHANNELS = 4


def convolve_separable(buf: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Convolve ``buf`` with ``kernel`` along rows, then along columns.

    ``buf`` is (height, width) or (height, width, channels); every channel is
    filtered the same way and borders replicate the edge sample. Returns
    float64 sums without rounding.
    """
    if buf.ndim not in (2, 3):
        raise ValueError(f"expected a 2-D or 3-D buffer, got shape {buf.shape}")
    work = np.ascontiguousarray(buf, dtype=np.float64)
    k = np.asarray(kernel, dtype=np.float64)
    if work.ndim == 3 and work.shape[2] > _MAX_CHANNELS:
        planes = [convolve_separable(work[..., c], k) for c in range(work.shape[2])]
        return np.stack(planes, axis=-1)
    out = cv2.sepFilter2D(work, cv2.CV_64F, k, k, borderType=cv2.BORDER_REPLICATE)
    # cv2 drops the trailing axis of single-channel 3-D input
    return out.reshape(work.shape)


def separable_gaussian_blur(buf: np.ndarray, radius: float) -> np.ndarray:
    out = convolve_separable(buf, gaussian_kernel(radius))
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)
