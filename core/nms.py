import cv2
import numpy as np

def nms(boxes, scores, conf_thres, iou_thres):
    keep = np.flatnonzero(scores >= conf_thres)
    if keep.size == 0:
        return np.array([], dtype=int)
    idxs = cv2.dnn.NMSBoxes(
        boxes[keep].tolist(), scores[keep].tolist(), conf_thres, iou_thres
    )
    idxs = np.array(idxs, dtype=int).flatten()
    return keep[idxs]
