"""Shared fixtures: headless SDL and a canvas that records draw calls."""

from __future__ import annotations

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest


class RecordingCanvas:
    """Canvas double that stores every draw call as a tuple."""

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls.append(('clear',))

    def fill_rect(self, color, rect) -> None:
        self.calls.append(('fill_rect', color, tuple(rect)))

    def circle(self, color, center, radius) -> None:
        self.calls.append(('circle', color, tuple(center), radius))

    def line(self, color, start, end, width=1) -> None:
        self.calls.append(('line', color, tuple(start), tuple(end), width))

    def polyline(self, color, points, width=1) -> None:
        self.calls.append(('polyline', color, list(points), width))

    def kinds(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
