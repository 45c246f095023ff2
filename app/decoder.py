import cv2
import numpy as np

class DecodeError(IOError):
    pass

_TO_RGBA = {1: cv2.COLOR_GRAY2RGBA, 3: cv2.COLOR_BGR2RGBA, 4: cv2.COLOR_BGRA2RGBA}

class Decoder:
    def __init__(self, path):
        self.path = str(path)
        img = cv2.imread(self.path, cv2.IMREAD_UNCHANGED)
        if img is None:
            raise DecodeError(f"Cannot read image: {self.path}")
        if img.dtype == np.uint16:
            img = (img >> 8).astype(np.uint8)
        elif img.dtype != np.uint8:
            raise DecodeError(f"Unsupported sample type {img.dtype} in {self.path}")
        channels = 1 if img.ndim == 2 else img.shape[2]
        if channels not in _TO_RGBA:
            raise DecodeError(f"Unsupported channel count {channels} in {self.path}")
        self.image = cv2.cvtColor(img, _TO_RGBA[channels])
        self.h, self.w = self.image.shape[:2]
