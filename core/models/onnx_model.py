import numpy as np
import cv2
import onnxruntime as ort

_INPUT_DTYPES = {"tensor(float16)": np.float16, "tensor(float)": np.float32}

class OnnxModel:
    def __init__(self, path, input_size=(640, 640), providers=None):
        opts = ort.SessionOptions()
        opts.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_ALL
        self.sess = ort.InferenceSession(
            str(path), opts, providers=providers or ["CUDAExecutionProvider", "CPUExecutionProvider"]
        )
        model_in = self.sess.get_inputs()[0]
        self.in_name = model_in.name
        self.in_dtype = _INPUT_DTYPES.get(model_in.type, np.float32)
        self.in_sz = input_size

    def preprocess(self, img_rgba):
        rgb = cv2.cvtColor(cv2.resize(img_rgba, self.in_sz), cv2.COLOR_RGBA2RGB)
        tensor = np.transpose(rgb.astype(np.float32) / 255.0, (2, 0, 1))[None]
        return tensor.astype(self.in_dtype)

    def __call__(self, img_rgba):
        h, w = img_rgba.shape[:2]
        return self.sess.run(None, {self.in_name: self.preprocess(img_rgba)}), w, h
