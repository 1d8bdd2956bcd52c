"""
Configuration

Central registry for the viewer constants and the runtime configuration
built from the command line.

Camera defaults, gesture sensitivity and the perspective constant are
module-level so the math modules can import them without pulling in pygame.
Window size and export directory can be overridden from the environment:

    TRAJVIEW_WIDTH, TRAJVIEW_HEIGHT, TRAJVIEW_EXPORT_DIR
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Camera
# ---------------------------------------------------------------------------

DEFAULT_CAMERA_DISTANCE_KM = 900_000.0
DEFAULT_ROTATION_VERTICAL = 0.3     # rad, around the screen-vertical (Y) axis
DEFAULT_ROTATION_HORIZONTAL = 0.4   # rad, around the screen-horizontal (X) axis

# Gesture-written distances are clamped to this range
MIN_CAMERA_DISTANCE_KM = 10_000.0
MAX_CAMERA_DISTANCE_KM = 50_000_000.0

ROTATION_SENSITIVITY = 0.005        # rad per pixel, mouse and touch
WHEEL_ZOOM_FACTOR = 0.9             # distance multiplier per wheel step (in)

# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

PERSPECTIVE_K = 500.0
MIN_DEPTH_KM = 1.0                  # z' + distance below this → not drawn

# ---------------------------------------------------------------------------
# Scene
# ---------------------------------------------------------------------------

EARTH_RADIUS_PX = 10
MOON_RADIUS_PX = 5
TRACK_SAMPLES = 180

# ---------------------------------------------------------------------------
# Launch form
# ---------------------------------------------------------------------------

IST_OFFSET_HRS = 5.5
DEFAULT_PERIGEE_KM = 200.0
DEFAULT_APOGEE_KM = 36_000.0
DEFAULT_LUNAR_ORBIT_RADIUS_KM = 1_837.4

# ---------------------------------------------------------------------------
# Window
# ---------------------------------------------------------------------------

WIDTH, HEIGHT = 1280, 800
FPS = 60
TITLE = "Earth-Moon Trajectory Viewer"


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class AppConfig:
    """Runtime configuration for the viewer window."""
    width: int = WIDTH
    height: int = HEIGHT
    fullscreen: bool = False
    export_dir: Path = Path(".")
    launch_date: str = ""
    launch_time: str = ""

    @classmethod
    def from_env(cls, **overrides) -> "AppConfig":
        """Build a config from TRAJVIEW_* variables, then apply overrides."""
        cfg = cls(
            width=_env_int("TRAJVIEW_WIDTH", WIDTH),
            height=_env_int("TRAJVIEW_HEIGHT", HEIGHT),
            export_dir=Path(os.environ.get("TRAJVIEW_EXPORT_DIR", ".")),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(cfg, key, value)
        return cfg
