from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class Config:
    inputs: List[str]
    output: Optional[str] = None
    output_dir: Optional[str] = None
    face_model: str = "yolov9e-face.onnx"
    providers: List[str] = field(default_factory=lambda: ["CUDAExecutionProvider", "CPUExecutionProvider"])
    blur_radius: float = 15
    feather_radius: float = 34
    min_confidence: float = 0.4
    iou_thresh: float = 0.45
    workers: int = 1
    log_level: str = "INFO"

    def validate(self):
        if not self.inputs:
            raise ValueError("at least one input image is required")
        if self.output and len(self.inputs) > 1:
            raise ValueError("--output can only be used with a single input; use --output-dir")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        for name in ("min_confidence", "iou_thresh"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {self.log_level!r}")
        return self
