"""
Results text, CSV and SVG export.

The SVG export replays the scene renderer's draw calls into an SvgCanvas,
so the file matches what is on screen for the same camera.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from xml.sax.saxutils import quoteattr

import numpy as np
import pandas as pd

from .camera import CameraState
from .scene import SceneRenderer
from .types import Vec3

logger = logging.getLogger(__name__)


@dataclass
class LaunchResult:
    """Output of one COMPUTE action."""
    jd: float
    moon: Vec3
    perigee_km: float
    apogee_km: float
    lunar_orbit_radius_km: float


def format_results(result: LaunchResult) -> str:
    m = result.moon
    return (
        f"Launch JD (UTC): {result.jd:.10f}\n"
        f"Moon Position (km): X={m.x:.10f}, Y={m.y:.10f}, Z={m.z:.10f}\n"
        f"Parking Orbit: perigee={result.perigee_km:.10f} km, "
        f"apogee={result.apogee_km:.10f} km\n"
        f"Target lunar orbit radius: {result.lunar_orbit_radius_km:.10f} km"
    )


def results_frame(result: LaunchResult) -> pd.DataFrame:
    return pd.DataFrame([{
        "launch_jd_utc": result.jd,
        "moon_x_km": result.moon.x,
        "moon_y_km": result.moon.y,
        "moon_z_km": result.moon.z,
        "perigee_km": result.perigee_km,
        "apogee_km": result.apogee_km,
        "lunar_orbit_radius_km": result.lunar_orbit_radius_km,
    }])


def export_csv(result: LaunchResult, path: Path) -> Path:
    """Write the results as a one-row CSV."""
    path = Path(path)
    results_frame(result).to_csv(path, index=False, float_format="%.10f")
    logger.info("Wrote %s", path)
    return path


# ---------------------------------------------------------------------------
# SVG
# ---------------------------------------------------------------------------

def _rgb(color) -> str:
    return "rgb({},{},{})".format(*color[:3])


class SvgCanvas:
    """Canvas that records draw calls as SVG elements."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.elements: List[str] = []

    def clear(self):
        self.elements.clear()

    def fill_rect(self, color, rect):
        x, y, w, h = rect
        self.elements.append(
            f'<rect x="{x:g}" y="{y:g}" width="{w:g}" height="{h:g}" '
            f'fill="{_rgb(color)}"/>')

    def circle(self, color, center, radius):
        self.elements.append(
            f'<circle cx="{center[0]:.3f}" cy="{center[1]:.3f}" r="{radius:g}" '
            f'fill="{_rgb(color)}"/>')

    def line(self, color, start, end, width=1):
        self.elements.append(
            f'<line x1="{start[0]:.3f}" y1="{start[1]:.3f}" '
            f'x2="{end[0]:.3f}" y2="{end[1]:.3f}" '
            f'stroke="{_rgb(color)}" stroke-width="{width}"/>')

    def polyline(self, color, points, width=1):
        if len(points) < 2:
            return
        pts = " ".join(f"{x:.3f},{y:.3f}" for x, y in points)
        self.elements.append(
            f'<polyline points={quoteattr(pts)} fill="none" '
            f'stroke="{_rgb(color)}" stroke-width="{width}"/>')

    def to_svg(self) -> str:
        body = "\n  ".join(self.elements)
        return (f'<svg xmlns="http://www.w3.org/2000/svg" '
                f'width="{self.width}" height="{self.height}">\n  {body}\n</svg>\n')


def render_svg(camera: CameraState, moon: Vec3, width: int, height: int,
               track: Optional[np.ndarray] = None) -> str:
    canvas = SvgCanvas(width, height)
    SceneRenderer(canvas, camera).render_at(moon, track)
    return canvas.to_svg()


def export_svg(camera: CameraState, moon: Vec3, width: int, height: int,
               path: Path, track: Optional[np.ndarray] = None) -> Path:
    """Render the current scene to an SVG file."""
    path = Path(path)
    path.write_text(render_svg(camera, moon, width, height, track), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
