"""
Camera state for the orbit view.

The camera always looks at the Earth (origin) from `distance` kilometres,
tilted by two rotation angles. Only GestureController writes to it; the
projector reads it.
"""

from __future__ import annotations
from dataclasses import dataclass

from .config import (
    DEFAULT_CAMERA_DISTANCE_KM,
    DEFAULT_ROTATION_VERTICAL,
    DEFAULT_ROTATION_HORIZONTAL,
    MIN_CAMERA_DISTANCE_KM,
    MAX_CAMERA_DISTANCE_KM,
)


@dataclass
class CameraState:
    distance: float = DEFAULT_CAMERA_DISTANCE_KM          # km, > 0
    rotation_vertical: float = DEFAULT_ROTATION_VERTICAL     # rad
    rotation_horizontal: float = DEFAULT_ROTATION_HORIZONTAL # rad

    def copy(self) -> "CameraState":
        return CameraState(self.distance, self.rotation_vertical,
                           self.rotation_horizontal)


def clamp_distance(distance: float) -> float:
    """Clamp a camera distance to the allowed zoom range."""
    return max(MIN_CAMERA_DISTANCE_KM, min(MAX_CAMERA_DISTANCE_KM, distance))
