from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# Screen coordinates in pixels, y grows downward
ScreenPoint = Tuple[float, float]

@dataclass(frozen=True, slots=True)
class Vec3:
    # kilometres, Earth-centred; y is "up" in world space
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

ORIGIN = Vec3(0.0, 0.0, 0.0)
