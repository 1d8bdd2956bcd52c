"""
UI Components - widgets for the launch form

- Button: clickable button with hover/pressed states
- TextInput: labelled single-line input field
- TextBlock: multi-line read-only text (results panel)
"""

import pygame
from typing import Optional, Callable, List, Tuple
from dataclasses import dataclass
from .theme import get_theme


@dataclass
class ButtonState:
    hovered: bool = False
    pressed: bool = False


class Button:
    """
    Interactive button component

    The callback fires on mouse-up inside the button after a
    mouse-down that also started inside it.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, callback: Optional[Callable] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.state = ButtonState()
        self.enabled = True
        self.theme = get_theme()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Returns:
            True if event was handled
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.state.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.state.pressed and self.rect.collidepoint(event.pos):
                self.state.pressed = False
                if self.callback:
                    self.callback()
                return True
            self.state.pressed = False

        return False

    def update(self, mouse_pos: Tuple[int, int]):
        """Update hover state"""
        self.state.hovered = self.enabled and self.rect.collidepoint(mouse_pos)

    def draw(self, surface: pygame.Surface):
        c = self.theme.colors
        if not self.enabled:
            bg, fg, border = c.BG_PANEL, c.BUTTON_DISABLED, c.BORDER_DISABLED
        elif self.state.pressed:
            bg, fg, border = c.ACCENT_YELLOW, c.BG_DARK, c.ACCENT_YELLOW
        elif self.state.hovered:
            bg, fg, border = c.BG_PANEL_LIGHT, c.BUTTON_HOVER, c.BORDER_FOCUS
        else:
            bg, fg, border = c.BG_PANEL, c.BUTTON_NORMAL, c.BORDER_NORMAL

        pygame.draw.rect(surface, bg, self.rect)
        pygame.draw.rect(surface, border, self.rect, 2)
        self.theme.draw_text(surface, self.theme.fonts.small(),
                             self.rect.centerx, self.rect.centery - 8,
                             self.text, fg, align='center')


class TextInput:
    """
    Labelled text input field

    The label is drawn above the box. Click to focus, type,
    ENTER or TAB to leave the field.
    """

    def __init__(self, x: int, y: int, width: int, label: str,
                 text: str = "", placeholder: str = "", max_length: int = 24):
        """
        Args:
            x, y: Position of the label; the box sits 18 px below
            width: Input width
            label: Caption above the box
            text: Initial value
            placeholder: Shown while empty
            max_length: Maximum text length
        """
        self.label = label
        self.rect = pygame.Rect(x, y + 18, width, 26)
        self.text = text[:max_length]
        self.placeholder = placeholder
        self.max_length = max_length
        self.active = False
        self.cursor_visible = True
        self.cursor_timer = 0.0
        self.theme = get_theme()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Returns:
            True if event was handled
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.active = self.rect.collidepoint(event.pos)
            return self.active

        if self.active and event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_TAB):
                self.active = False
            elif event.key == pygame.K_ESCAPE:
                self.active = False
            elif len(self.text) < self.max_length and event.unicode.isprintable():
                self.text += event.unicode
            return True

        return False

    def update(self, dt: float):
        """Update cursor blink"""
        self.cursor_timer += dt
        if self.cursor_timer > 0.5:
            self.cursor_visible = not self.cursor_visible
            self.cursor_timer = 0.0

    def draw(self, surface: pygame.Surface):
        c = self.theme.colors
        font = self.theme.fonts.small()

        self.theme.draw_text(surface, self.theme.fonts.tiny(),
                             self.rect.x, self.rect.y - 16, self.label, c.FG_DIM)

        pygame.draw.rect(surface, c.BG_INPUT, self.rect)
        border = c.BORDER_FOCUS if self.active else c.BORDER_NORMAL
        pygame.draw.rect(surface, border, self.rect, 2)

        if self.text:
            self.theme.draw_text(surface, font, self.rect.x + 6, self.rect.y + 5,
                                 self.text, c.FG_PRIMARY)
        else:
            self.theme.draw_text(surface, font, self.rect.x + 6, self.rect.y + 5,
                                 self.placeholder, c.FG_DARK)

        if self.active and self.cursor_visible:
            cursor_x = self.rect.x + 6 + font.size(self.text)[0] + 1
            pygame.draw.line(surface, c.FG_PRIMARY,
                             (cursor_x, self.rect.y + 5),
                             (cursor_x, self.rect.y + 20), 2)

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str):
        self.text = text[:self.max_length]


class TextBlock:
    """Read-only multi-line text area"""

    def __init__(self, rect: pygame.Rect, title: str = ""):
        self.rect = pygame.Rect(rect)
        self.title = title
        self.lines: List[str] = []
        self.color: Optional[Tuple[int, int, int]] = None
        self.theme = get_theme()

    def set_text(self, text: str, color: Optional[Tuple[int, int, int]] = None):
        self.lines = text.splitlines()
        self.color = color

    def get_text(self) -> str:
        return "\n".join(self.lines)

    def draw(self, surface: pygame.Surface):
        self.theme.draw_panel(surface, self.rect, self.title)
        font = self.theme.fonts.tiny()
        color = self.color or self.theme.colors.FG_PRIMARY
        y = self.rect.y + (32 if self.title else 8)
        for line in self.lines:
            if y > self.rect.bottom - 14:
                break
            self.theme.draw_text(surface, font, self.rect.x + 10, y, line, color)
            y += 16
