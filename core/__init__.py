"""
Core — camera, projection, gestures and scene drawing for the orbit view.
No pygame import at module level; the pygame-specific code lives in ui/.
"""

from .types import Vec3, ORIGIN
from .camera import CameraState, clamp_distance
from .projection import project_point, project_points
from .gestures import GestureController
from .scene import SceneRenderer, PygameCanvas

__all__ = [
    "Vec3", "ORIGIN",
    "CameraState", "clamp_distance",
    "project_point", "project_points",
    "GestureController",
    "SceneRenderer", "PygameCanvas",
]
