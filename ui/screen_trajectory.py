"""
Trajectory Screen — Earth–Moon orbit view with launch form

Layout
------
  left    launch form (date, time, parking orbit, lunar orbit radius)
  right   3D orbit view (Earth at origin, Moon, Earth→Moon line)
  bottom  results panel

Controls
--------
  Drag mouse / one finger   Rotate view
  Pinch / mouse wheel       Zoom
  R                         Reset view
  ENTER                     Compute (when no field is focused)
  F11                       Fullscreen
  ESC                       Quit
"""

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import pygame

from core.astro_time import (
    LaunchInputError, datetime_to_julian_date, parse_km, parse_launch_time,
)
from core.config import (
    AppConfig, IST_OFFSET_HRS, TRACK_SAMPLES,
    DEFAULT_PERIGEE_KM, DEFAULT_APOGEE_KM, DEFAULT_LUNAR_ORBIT_RADIUS_KM,
)
from core.export import LaunchResult, export_csv, export_svg, format_results
from core.gestures import GestureController, Pinching, Rotating
from core.scene import PygameCanvas, SceneRenderer
from core.types import Vec3
from universe import (
    DEFAULT_MOON_POSITION, MoonMeanElements, moon_mean_elements, moon_position_jd,
    moon_track,
)

from .base_screen import BaseScreen
from .components import Button, TextBlock, TextInput
from .input_adapter import PygameGestureAdapter

logger = logging.getLogger(__name__)

SIDEBAR_W = 260
RESULTS_H = 116   # title + 5 lines (results and a status line)
FOOTER_H = 24


class TrajectoryScreen(BaseScreen):
    """Orbit view plus launch form."""

    def __init__(self, config: AppConfig, size=(1280, 800)):
        super().__init__("TRAJECTORY")
        self.config = config
        self.width, self.height = size

        self.gestures = GestureController()
        self.renderer = SceneRenderer(None, self.gestures.camera)
        self.adapter = PygameGestureAdapter(self.gestures, self.canvas_rect, size)

        self.moon: Vec3 = DEFAULT_MOON_POSITION
        self.track: Optional[np.ndarray] = None
        self.result: Optional[LaunchResult] = None
        self.elements: Optional[MoonMeanElements] = None

        self._create_widgets()
        self.results = TextBlock(self.results_rect, "RESULTS")
        self.results.set_text("Enter launch date/time (IST) and press COMPUTE.",
                              self.theme.colors.FG_DIM)
        self._quit = False

    # -----------------------------------------------------------------------
    # Layout
    # -----------------------------------------------------------------------

    @property
    def canvas_rect(self) -> pygame.Rect:
        return pygame.Rect(SIDEBAR_W, 0, max(1, self.width - SIDEBAR_W),
                           max(1, self.height - RESULTS_H - FOOTER_H))

    @property
    def results_rect(self) -> pygame.Rect:
        return pygame.Rect(SIDEBAR_W, self.height - RESULTS_H - FOOTER_H,
                           max(1, self.width - SIDEBAR_W), RESULTS_H)

    def _create_widgets(self):
        x, w = 14, SIDEBAR_W - 28
        self.fields = {
            'date':    TextInput(x, 56,  w, "LAUNCH DATE (IST)", self.config.launch_date,
                                 placeholder="YYYY-MM-DD"),
            'time':    TextInput(x, 106, w, "LAUNCH TIME (IST)", self.config.launch_time,
                                 placeholder="HH:MM[:SS]"),
            'perigee': TextInput(x, 156, w, "PARKING PERIGEE (km)", f"{DEFAULT_PERIGEE_KM:g}"),
            'apogee':  TextInput(x, 206, w, "PARKING APOGEE (km)", f"{DEFAULT_APOGEE_KM:g}"),
            'radius':  TextInput(x, 256, w, "LUNAR ORBIT RADIUS (km)",
                                 f"{DEFAULT_LUNAR_ORBIT_RADIUS_KM:g}"),
        }
        self.buttons = {
            'compute': Button(x, 316, w, 30, "COMPUTE", callback=self.compute),
            'csv':     Button(x, 354, (w - 8) // 2, 30, "CSV", callback=self.save_csv),
            'svg':     Button(x + (w + 8) // 2, 354, (w - 8) // 2, 30, "SVG",
                              callback=self.save_svg),
            'reset':   Button(x, 392, w, 30, "RESET VIEW", callback=self.gestures.reset_camera),
        }

    def resize(self, width: int, height: int):
        self.width, self.height = width, height
        self.adapter.resize(self.canvas_rect, (width, height))
        self.results.rect = self.results_rect

    # -----------------------------------------------------------------------
    # Actions
    # -----------------------------------------------------------------------

    def render_at(self, moon: Vec3, track: Optional[np.ndarray] = None):
        """Show the Moon at `moon` (km); the frame is redrawn every update."""
        self.moon = moon
        self.track = track

    def compute(self):
        f = self.fields
        try:
            launch_utc = parse_launch_time(f['date'].get_text(), f['time'].get_text(),
                                           IST_OFFSET_HRS)
            perigee = parse_km(f['perigee'].get_text(), "Perigee")
            apogee = parse_km(f['apogee'].get_text(), "Apogee")
            radius = parse_km(f['radius'].get_text(), "Lunar orbit radius")
        except LaunchInputError as exc:
            logger.warning("Compute rejected: %s", exc)
            self.results.set_text(str(exc), self.theme.colors.ERROR)
            return

        jd = datetime_to_julian_date(launch_utc)
        moon = moon_position_jd(jd)
        self.render_at(moon, moon_track(jd, TRACK_SAMPLES))
        self.elements = moon_mean_elements(jd)

        self.result = LaunchResult(jd, moon, perigee, apogee, radius)
        self.results.set_text(format_results(self.result))
        logger.info("Launch %s UTC (JD %.6f): Moon at %.1f, %.1f, %.1f km",
                    launch_utc.isoformat(), jd, moon.x, moon.y, moon.z)

    def save_csv(self):
        if self.result is None:
            self.results.set_text("Nothing to export yet: press COMPUTE first.",
                                  self.theme.colors.ERROR)
            return
        self._export(lambda p: export_csv(self.result, p), "trajectory.csv")

    def save_svg(self):
        r = self.canvas_rect
        self._export(lambda p: export_svg(self.gestures.camera, self.moon,
                                          r.width, r.height, p, self.track),
                     "trajectory.svg")

    def _export(self, write, filename: str):
        path = Path(self.config.export_dir) / filename
        try:
            write(path)
        except OSError:
            logger.exception("Export to %s failed", path)
            self.results.set_text(f"Could not write {path}", self.theme.colors.ERROR)
            return
        text = format_results(self.result) if self.result else ""
        self.results.set_text(f"{text}\nSaved {path}".strip())

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def handle_input(self, events) -> Optional[str]:
        mp = pygame.mouse.get_pos()
        for btn in self.buttons.values():
            btn.update(mp)

        for event in events:
            if self._handle_widgets(event):
                continue
            if self.adapter.handle_event(event):
                continue
            if event.type == pygame.KEYDOWN:
                k = event.key
                if k == pygame.K_ESCAPE:
                    self._quit = True
                elif k == pygame.K_r:
                    self.gestures.reset_camera()
                elif k in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self.compute()

        if self._quit:
            return "QUIT"
        return None

    def _handle_widgets(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONUP:
            # Buttons must see every UP to release their pressed state
            handled = [b.handle_event(event) for b in self.buttons.values()]
            return any(handled) and not self.gestures.dragging

        consumed = False
        for field in self.fields.values():
            consumed = field.handle_event(event) or consumed
        if event.type == pygame.MOUSEBUTTONDOWN:
            consumed = any(b.handle_event(event) for b in self.buttons.values()) or consumed
        return consumed

    # -----------------------------------------------------------------------
    # Update / Render
    # -----------------------------------------------------------------------

    def update(self, dt: float):
        for field in self.fields.values():
            field.update(dt)

    def render(self, surface: pygame.Surface):
        W, H = surface.get_width(), surface.get_height()
        if (W, H) != (self.width, self.height):
            self.resize(W, H)

        view = self.canvas_rect.clip(surface.get_rect())
        if view.width and view.height:
            self.renderer.canvas = PygameCanvas(surface.subsurface(view))
            self.renderer.render_at(self.moon, self.track)
            self._draw_hud(surface, view)
        self._draw_sidebar(surface)
        self.results.draw(surface)
        self.draw_footer(surface, pygame.Rect(0, H - FOOTER_H, W, FOOTER_H),
                         "[DRAG] Rotate  [PINCH/WHEEL] Zoom  [R] Reset  "
                         "[ENTER] Compute  [F11] Fullscreen  [ESC] Quit")

    def _draw_sidebar(self, surface):
        panel = pygame.Rect(0, 0, SIDEBAR_W, self.height - FOOTER_H)
        self.theme.draw_panel(surface, panel)
        self.theme.draw_text(surface, self.theme.fonts.title(), 14, 14,
                             "LAUNCH WINDOW", self.theme.colors.FG_BRIGHT)
        for field in self.fields.values():
            field.draw(surface)
        for btn in self.buttons.values():
            btn.draw(surface)

    def _draw_hud(self, surface, view: pygame.Rect):
        cam = self.gestures.camera
        session = self.gestures.touch_session
        if isinstance(session, Pinching):
            mode = "PINCH"
        elif isinstance(session, Rotating) or self.gestures.dragging:
            mode = "ROTATE"
        else:
            mode = "-"
        lines = [
            f"DIST {cam.distance:,.0f} km",
            f"ROT V {cam.rotation_vertical:+.3f} rad",
            f"ROT H {cam.rotation_horizontal:+.3f} rad",
            f"GESTURE {mode}",
        ]
        if self.elements is not None:
            lines.append(f"MOON M {self.elements.mean_anomaly_deg:.2f} deg  "
                         f"L {self.elements.mean_longitude_deg:.2f} deg")
        font = self.theme.fonts.tiny()
        y = view.y + 8
        for line in lines:
            self.theme.draw_text(surface, font, view.x + 10, y, line,
                                 self.theme.colors.FG_DIM)
            y += 15
