import numpy as np

def center_to_corner(boxes):
    out = np.array(boxes, dtype=np.float32, copy=True)
    out[:, 0] -= out[:, 2] / 2
    out[:, 1] -= out[:, 3] / 2
    return out

def scale_boxes(boxes, orig_w, orig_h, input_size=(640, 640)):
    sx, sy = orig_w / input_size[0], orig_h / input_size[1]
    boxes = np.array(boxes, dtype=np.float32, copy=True)
    boxes[:, [0, 2]] *= sx
    boxes[:, [1, 3]] *= sy
    return boxes
