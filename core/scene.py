"""
Scene Renderer — Earth, Moon and the line between them.

Draws through a small immediate-mode Canvas interface so the same draw
calls go to the pygame window (PygameCanvas) or to an SVG file
(core.export.SvgCanvas).

Every render_at() call overwrites the whole frame.
"""

from __future__ import annotations
import math
from typing import Optional, Protocol, Sequence, Tuple

import numpy as np

from .camera import CameraState
from .config import EARTH_RADIUS_PX, MOON_RADIUS_PX
from .projection import project_point, project_points
from .types import ORIGIN, ScreenPoint, Vec3

Color = Tuple[int, int, int]

BACKGROUND = (0, 0, 0)
EARTH_COLOR = (0, 0, 255)
MOON_COLOR = (128, 128, 128)
LINK_COLOR = (255, 255, 255)
TRACK_COLOR = (70, 70, 90)


class Canvas(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...
    def fill_rect(self, color: Color, rect: Tuple[float, float, float, float]) -> None: ...
    def circle(self, color: Color, center: ScreenPoint, radius: float) -> None: ...
    def line(self, color: Color, start: ScreenPoint, end: ScreenPoint,
             width: int = 1) -> None: ...
    def polyline(self, color: Color, points: Sequence[ScreenPoint],
                 width: int = 1) -> None: ...


class PygameCanvas:
    """Canvas backed by a pygame.Surface (or a subsurface of the window)."""

    def __init__(self, surface):
        self.surface = surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def clear(self):
        self.surface.fill((0, 0, 0, 0))

    def fill_rect(self, color, rect):
        import pygame
        pygame.draw.rect(self.surface, color, pygame.Rect(rect))

    def circle(self, color, center, radius):
        import pygame
        pygame.draw.circle(self.surface, color, center, radius)

    def line(self, color, start, end, width=1):
        import pygame
        pygame.draw.line(self.surface, color, start, end, width)

    def polyline(self, color, points, width=1):
        import pygame
        if len(points) >= 2:
            pygame.draw.lines(self.surface, color, False, points, width)


def _split_visible(screen: np.ndarray) -> list:
    """Break a projected track into runs of drawable points (NaN = gap)."""
    runs, run = [], []
    for x, y in screen:
        if math.isfinite(x) and math.isfinite(y):
            run.append((float(x), float(y)))
        elif run:
            runs.append(run)
            run = []
    if run:
        runs.append(run)
    return runs


class SceneRenderer:
    """
    Draws the Earth–Moon scene for the current camera.

    Args:
        canvas: Target drawing surface
        camera: Camera state (read only; owned by the GestureController)
    """

    def __init__(self, canvas: Canvas, camera: CameraState):
        self.canvas = canvas
        self.camera = camera
        self.last_earth: Optional[ScreenPoint] = None
        self.last_moon: Optional[ScreenPoint] = None

    def project(self, point: Vec3) -> Optional[ScreenPoint]:
        return project_point(point, self.camera, self.canvas.width, self.canvas.height)

    def render_at(self, moon: Vec3, track: Optional[np.ndarray] = None):
        """
        Redraw the frame with the Moon at `moon` (km).

        Args:
            moon: Moon position, Earth-centred km
            track: Optional (N, 3) array of orbit positions drawn underneath
        """
        c = self.canvas
        w, h = c.width, c.height

        c.clear()
        c.fill_rect(BACKGROUND, (0, 0, w, h))

        if track is not None and len(track):
            for run in _split_visible(project_points(track, self.camera, w, h)):
                c.polyline(TRACK_COLOR, run, 1)

        earth = self.project(ORIGIN)
        moon_px = self.project(moon)

        if earth is not None:
            c.circle(EARTH_COLOR, earth, EARTH_RADIUS_PX)
        if moon_px is not None:
            c.circle(MOON_COLOR, moon_px, MOON_RADIUS_PX)
        if earth is not None and moon_px is not None:
            c.line(LINK_COLOR, earth, moon_px, 1)

        self.last_earth = earth
        self.last_moon = moon_px
