import os
import tempfile
from pathlib import Path

import cv2

class EncodeError(IOError):
    pass

_ALPHA_EXTS = {".png", ".webp", ".tif", ".tiff"}

class Encoder:
    def __init__(self, path):
        self.path = Path(path)
        self.ext = self.path.suffix.lower() or ".png"

    def write(self, image):
        code = cv2.COLOR_RGBA2BGRA if self.ext in _ALPHA_EXTS else cv2.COLOR_RGBA2BGR
        try:
            ok, buf = cv2.imencode(self.ext, cv2.cvtColor(image, code))
        except cv2.error as e:
            raise EncodeError(f"Cannot encode image as {self.ext}: {self.path}") from e
        if not ok:
            raise EncodeError(f"Cannot encode image as {self.ext}: {self.path}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(buf.tobytes())
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise
        return self.path
