from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    x: float
    y: float
    width: float
    height: float
    score: float = 1.0

    def __post_init__(self):
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"score must be within [0, 1], got {self.score}")
