import logging

from core.compositor import DimensionMismatchError, composite
from core.mask import ellipse_mask, feather_mask
from core.separable_blur import separable_gaussian_blur

class BlurProcessor:
    def __init__(self, cfg):
        self.cfg = cfg

    def blur(self, image, regions):
        if image.ndim != 3:
            raise DimensionMismatchError(f"expected an (h, w, channels) image, got shape {image.shape}")
        if not regions:
            return image.copy()

        h, w = image.shape[:2]
        blurred = separable_gaussian_blur(image, self.cfg.blur_radius)
        output = image.copy()
        for i, region in enumerate(regions, 1):
            mask = ellipse_mask(region, w, h)
            feathered = feather_mask(mask, self.cfg.feather_radius)
            composite(output, blurred, feathered)
            logging.debug("region %d composited (%d px masked)", i, int((mask > 0).sum()))
        return output
