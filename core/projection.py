"""
Orbit-camera projection: 3D kilometres -> 2D pixels.

Two rotations followed by a depth-offset divide:

    1. around the vertical (Y) axis by camera.rotation_vertical   (X–Z plane)
    2. around the horizontal (X) axis by camera.rotation_horizontal (Y–Z plane)
    3. scale = K / (z' + distance);  screen = centre + (x', -y') * scale

The order matters: swapping the two rotations gives a different view.
This is not a true pinhole projection, just an orbit camera that shrinks
things with depth.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np

from .camera import CameraState
from .config import PERSPECTIVE_K, MIN_DEPTH_KM
from .types import ScreenPoint, Vec3


def rotate_vertical(x: float, y: float, z: float,
                    angle: float) -> Tuple[float, float, float]:
    """Rotate around the Y axis (X–Z plane)."""
    c, s = math.cos(angle), math.sin(angle)
    return c * x + s * z, y, -s * x + c * z


def rotate_horizontal(x: float, y: float, z: float,
                      angle: float) -> Tuple[float, float, float]:
    """Rotate around the X axis (Y–Z plane)."""
    c, s = math.cos(angle), math.sin(angle)
    return x, c * y - s * z, s * y + c * z


def to_camera_space(point: Vec3, camera: CameraState) -> Tuple[float, float, float]:
    x, y, z = rotate_vertical(point.x, point.y, point.z, camera.rotation_vertical)
    return rotate_horizontal(x, y, z, camera.rotation_horizontal)


def project_point(point: Vec3, camera: CameraState,
                  width: int, height: int) -> Optional[ScreenPoint]:
    """
    Project a world point to screen pixels.

    Args:
        point: Position in km (Earth at origin)
        camera: Current camera state
        width, height: Viewport size in pixels

    Returns:
        (x, y) pixels, or None if the point is at or behind the camera
    """
    x, y, z = to_camera_space(point, camera)
    depth = z + camera.distance
    if depth < MIN_DEPTH_KM:
        return None
    scale = PERSPECTIVE_K / depth
    return (width / 2 + x * scale, height / 2 - y * scale)


def project_points(points: np.ndarray, camera: CameraState,
                   width: int, height: int) -> np.ndarray:
    """
    Vectorised project_point for an (N, 3) array.

    Rows at or behind the camera come back as NaN.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    cv, sv = math.cos(camera.rotation_vertical), math.sin(camera.rotation_vertical)
    ch, sh = math.cos(camera.rotation_horizontal), math.sin(camera.rotation_horizontal)

    x = cv * pts[:, 0] + sv * pts[:, 2]
    z1 = -sv * pts[:, 0] + cv * pts[:, 2]
    y = ch * pts[:, 1] - sh * z1
    z = sh * pts[:, 1] + ch * z1

    depth = z + camera.distance
    visible = depth >= MIN_DEPTH_KM
    scale = np.full_like(depth, np.nan)
    scale[visible] = PERSPECTIVE_K / depth[visible]

    out = np.empty((pts.shape[0], 2), dtype=np.float64)
    out[:, 0] = width / 2 + x * scale
    out[:, 1] = height / 2 - y * scale
    return out
