import numpy as np


class DimensionMismatchError(ValueError):
    pass


def _alpha(mask: np.ndarray) -> np.ndarray:
    if mask.ndim == 3:
        # RGBA mask: opacity lives in the alpha channel
        mask = mask[..., 3]
    return mask.astype(np.float64) / 255.0


def composite(output: np.ndarray, blurred: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """
    Blend ``blurred`` over ``output`` in place, using ``mask`` as opacity.

    Each channel becomes ``output + (blurred - output) * mask / 255``, rounded
    back to 8 bits. Where the mask is 0 the pixel is left bit-identical.
    """
    if output.shape != blurred.shape:
        raise DimensionMismatchError(
            f"blurred layer {blurred.shape} does not match output {output.shape}"
        )
    if mask.shape[:2] != output.shape[:2]:
        raise DimensionMismatchError(
            f"mask {mask.shape[:2]} does not match output {output.shape[:2]}"
        )

    alpha = _alpha(mask)
    if output.ndim == 3:
        alpha = alpha[..., None]
    base = output.astype(np.float64)
    mixed = base + (blurred.astype(np.float64) - base) * alpha
    np.copyto(output, np.clip(np.rint(mixed), 0, 255).astype(output.dtype))
    return output
