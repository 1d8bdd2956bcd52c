"""
Earth-Moon Trajectory Viewer - Main Application

Opens the orbit view window:
- Launch form (date/time in IST, parking orbit, lunar orbit radius)
- Interactive 3D view (drag / pinch / wheel)
- CSV and SVG export
"""

import argparse
import logging
import sys
from pathlib import Path

import pygame

from core.config import AppConfig, FPS, TITLE
from core.logging_config import setup_logging
from ui.theme import get_theme
from ui.screen_trajectory import TrajectoryScreen

logger = logging.getLogger("main_app")


class TrajectoryViewer:
    """
    Main application

    Owns the window, the frame loop and the single trajectory screen.
    """

    def __init__(self, config: AppConfig):
        pygame.init()

        self.config = config
        self.windowed_size = (config.width, config.height)
        self.fullscreen = False
        self.screen = pygame.display.set_mode(self.windowed_size, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.theme = get_theme()
        self.view = TrajectoryScreen(config, self.screen.get_size())
        self.view.on_enter()

        if config.fullscreen:
            self.toggle_fullscreen()

        # Both fields given on the command line: show that launch right away
        if config.launch_date and config.launch_time:
            self.view.compute()

        self.running = True
        logger.info("%s initialized (%dx%d)", TITLE, *self.screen.get_size())

    def run(self):
        """Main loop"""
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)

            if self.view.handle_input(events) == "QUIT":
                self.running = False

            self.view.update(dt)

            self.screen.fill(self.theme.colors.BG_DARK)
            self.view.render(self.screen)
            pygame.display.flip()

        self.quit()

    def toggle_fullscreen(self):
        """Toggle between fullscreen and windowed mode"""
        self.fullscreen = not self.fullscreen

        if self.fullscreen:
            info = pygame.display.Info()
            size = (info.current_w, info.current_h)
            self.screen = pygame.display.set_mode(size, pygame.FULLSCREEN)
        else:
            size = self.windowed_size
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.view.resize(*self.screen.get_size())
        logger.info("Switched to %s: %dx%d",
                    "fullscreen" if self.fullscreen else "windowed", *size)

    def handle_resize(self, width: int, height: int):
        if self.fullscreen:
            return
        self.windowed_size = (width, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.view.resize(width, height)
        logger.debug("Window resized to %dx%d", width, height)

    def quit(self):
        self.view.on_exit()
        logger.info("Shutting down")
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=TITLE)
    ap.add_argument("--width", type=int, default=None, help="window width (px)")
    ap.add_argument("--height", type=int, default=None, help="window height (px)")
    ap.add_argument("--fullscreen", action="store_true")
    ap.add_argument("--date", default=None, help="launch date YYYY-MM-DD (IST)")
    ap.add_argument("--time", default=None, help="launch time HH:MM[:SS] (IST)")
    ap.add_argument("--export-dir", type=Path, default=None,
                    help="directory for trajectory.csv / trajectory.svg")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None)
    return ap


def main(argv=None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        config = AppConfig.from_env(
            width=args.width, height=args.height,
            fullscreen=args.fullscreen or None,
            export_dir=args.export_dir,
            launch_date=args.date, launch_time=args.time,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    try:
        TrajectoryViewer(config).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        pygame.quit()
    except Exception:
        logger.exception("Fatal error")
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
