"""
UI Module - pygame theme, widgets and the trajectory screen
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Button, TextInput, TextBlock
from .input_adapter import PygameGestureAdapter
from .screen_trajectory import TrajectoryScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen",
    "Button", "TextInput", "TextBlock",
    "PygameGestureAdapter",
    "TrajectoryScreen",
]
