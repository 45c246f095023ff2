import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .decoder import DecodeError, Decoder
from .encoder import EncodeError, Encoder
from .blur_processor import BlurProcessor

def default_output_path(input_path, output_dir=None):
    name = f"faceshield-{Path(input_path).stem}.png"
    return Path(output_dir) / name if output_dir else Path(name)

class AppRunner:
    def __init__(self, cfg, detector=None):
        self.cfg = cfg
        if detector is None:
            from core.models.face_detector import FaceDetector
            detector = FaceDetector(cfg.face_model, providers=cfg.providers)
        self.det = detector
        self.blur = BlurProcessor(cfg)

    def output_for(self, path):
        if self.cfg.output:
            return Path(self.cfg.output)
        return default_output_path(path, self.cfg.output_dir)

    def process(self, path):
        dec = Decoder(path)
        logging.info("%s: %dx%d px", path, dec.w, dec.h)

        regions = self.det.detect(dec.image, conf=self.cfg.min_confidence, iou=self.cfg.iou_thresh)
        logging.info("%s: detected %d face(s)", path, len(regions))
        if not regions:
            logging.warning("%s: no faces found, writing image unmodified", path)
        for i, r in enumerate(regions, 1):
            logging.info(
                "  face %d: score=%.2f box=[%d,%d,%d,%d]",
                i, r.score, round(r.x), round(r.y), round(r.width), round(r.height),
            )

        result = self.blur.blur(dec.image, regions)
        out = Encoder(self.output_for(path)).write(result)
        logging.info("%s: saved %s", path, out)
        return out

    def _safe_process(self, path):
        try:
            return self.process(path)
        except (DecodeError, EncodeError) as e:
            logging.error("%s", e)
        except Exception:
            logging.exception("%s: redaction failed", path)
        return None

    def run(self):
        with ThreadPoolExecutor(max_workers=self.cfg.workers) as pool:
            results = list(pool.map(self._safe_process, self.cfg.inputs))
        failed = sum(1 for r in results if r is None)
        logging.info("done: %d ok, %d failed", len(results) - failed, failed)
        return failed
