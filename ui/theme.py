"""
UI Theme - Mission Console Style

Panel colors and fonts for the launch form, results and HUD.
The 3D scene itself uses the plain colors in core.scene.
"""

import pygame
from typing import Dict, Tuple
from dataclasses import dataclass


class Colors:
    """Dark navy panels, cyan text, yellow/red accents"""

    BG_DARK = (4, 6, 14)          # Window background
    BG_PANEL = (10, 14, 28)
    BG_PANEL_LIGHT = (18, 24, 44)  # Hovered button
    BG_INPUT = (14, 20, 38)

    FG_PRIMARY = (150, 210, 255)
    FG_DIM = (100, 140, 180)      # Labels, HUD
    FG_DARK = (60, 80, 110)       # Placeholders
    FG_BRIGHT = (220, 240, 255)

    ACCENT_CYAN = (0, 255, 255)
    ACCENT_YELLOW = (255, 220, 0)
    ACCENT_RED = (255, 70, 70)

    BUTTON_NORMAL = FG_PRIMARY
    BUTTON_HOVER = ACCENT_CYAN
    BUTTON_DISABLED = FG_DARK

    BORDER_NORMAL = FG_DIM
    BORDER_FOCUS = ACCENT_CYAN
    BORDER_DISABLED = FG_DARK

    ERROR = ACCENT_RED


@dataclass
class FontConfig:
    """Point sizes per font role"""
    family: str = "Consolas"
    size_title: int = 22
    size_normal: int = 16
    size_small: int = 14
    size_tiny: int = 12
    bold_title: bool = True

    def sizes(self) -> Dict[str, int]:
        return {'title': self.size_title, 'normal': self.size_normal,
                'small': self.size_small, 'tiny': self.size_tiny}


class Fonts:
    """
    Font cache

    Monospaced system font when one is installed, pygame's bundled
    default otherwise.
    """

    _fonts: Dict[str, pygame.font.Font] = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: FontConfig = None):
        if config is not None:
            cls._config = config
        pygame.font.init()

        cfg = cls._config
        for family in (cfg.family, "Courier New", "Courier", "monospace"):
            try:
                cls._fonts = {
                    role: pygame.font.SysFont(family, size,
                                              bold=cfg.bold_title and role == 'title')
                    for role, size in cfg.sizes().items()
                }
                return
            except (pygame.error, OSError):
                continue
        cls._fonts = {role: pygame.font.Font(None, size)
                      for role, size in cfg.sizes().items()}

    @classmethod
    def get(cls, role: str = 'normal') -> pygame.font.Font:
        if not cls._fonts:
            cls.initialize()
        return cls._fonts.get(role, cls._fonts['normal'])

    @classmethod
    def title(cls) -> pygame.font.Font:
        return cls.get('title')

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.get('normal')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')

    @classmethod
    def tiny(cls) -> pygame.font.Font:
        return cls.get('tiny')


class Theme:
    """Colors and fonts plus the panel/text drawing helpers"""

    border_width = 2

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   title: str = "",
                   fg_color: Tuple[int, int, int] = None,
                   bg_color: Tuple[int, int, int] = None):
        """
        Filled panel with a border and an optional title in the top-left.

        Args:
            fg_color: Border color (None = BORDER_NORMAL)
            bg_color: Fill color (None = BG_PANEL)
        """
        pygame.draw.rect(surface, bg_color or self.colors.BG_PANEL, rect)
        pygame.draw.rect(surface, fg_color or self.colors.BORDER_NORMAL, rect,
                         self.border_width)
        if title:
            self.draw_text(surface, self.fonts.normal(), rect.x + 10, rect.y + 8,
                           title, self.colors.FG_PRIMARY)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: Tuple[int, int, int],
                  align: str = 'left'):
        """Blit one line of text; align='center' centres it on x."""
        rendered = font.render(text, True, color)
        if align == 'center':
            x -= rendered.get_width() // 2
        surface.blit(rendered, (x, y))


# Global theme instance
_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
