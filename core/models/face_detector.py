import numpy as np

from .onnx_model import OnnxModel
from ..nms import nms
from ..bbox_utils import center_to_corner, scale_boxes
from ..region import Region

class FaceDetector(OnnxModel):
    def detect(self, img, conf=0.4, iou=0.45):
        outs, w, h = self(img)
        preds = outs[0][0].T.astype(np.float32)   # (8400,5) cx,cy,w,h,score
        boxes, scores = center_to_corner(preds[:, :4]), preds[:, 4]
        idxs = nms(boxes, scores, conf, iou)
        if len(idxs) == 0:
            return []
        boxes = scale_boxes(boxes[idxs], w, h, self.in_sz)
        return [
            Region(float(x), float(y), float(bw), float(bh), float(min(1.0, max(0.0, s))))
            for (x, y, bw, bh), s in zip(boxes, scores[idxs])
        ]
