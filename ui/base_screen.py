"""
Base Screen Class

Abstract base class for viewer screens.
"""

import pygame
from abc import ABC, abstractmethod
from typing import Optional
from .theme import get_theme


class BaseScreen(ABC):
    """
    Abstract base class for all screens

    A screen receives the frame's events, updates its state and draws
    itself onto the window surface.
    """

    def __init__(self, screen_name: str):
        """
        Args:
            screen_name: Unique identifier for this screen
        """
        self.screen_name = screen_name
        self.active = False
        self.theme = get_theme()

    def on_enter(self):
        """Called when screen becomes active"""
        self.active = True

    def on_exit(self):
        """Called when screen becomes inactive"""
        self.active = False

    @abstractmethod
    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        """
        Handle input events

        Args:
            events: List of pygame events for this frame

        Returns:
            "QUIT" to close the viewer, or None
        """

    @abstractmethod
    def update(self, dt: float):
        """
        Args:
            dt: Delta time in seconds since last update
        """

    @abstractmethod
    def render(self, surface: pygame.Surface):
        """
        Args:
            surface: Main display surface to render to
        """

    def draw_footer(self, surface: pygame.Surface, rect: pygame.Rect,
                    controls: str):
        """
        Draw standard footer with controls

        Args:
            surface: Target surface
            rect: Footer rectangle
            controls: Control hints (e.g., "[ESC] Quit  [R] Reset view")
        """
        self.theme.draw_panel(surface, rect)
        self.theme.draw_text(surface, self.theme.fonts.tiny(),
                             rect.x + 10, rect.y + 6,
                             controls, self.theme.colors.FG_DIM)
