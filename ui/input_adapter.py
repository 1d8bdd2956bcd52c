"""
pygame -> GestureController adapter.

Translates mouse, wheel and finger events into core.gestures events.
Finger coordinates arrive normalised to the window (0..1); they are
converted to window pixels. pygame does not report the full set of active
contacts with each finger event, so the adapter keeps it.

Mouse events that SDL synthesised from a touch (event.touch == True) are
dropped so a single finger never drives both the touch and mouse paths.
The screen still passes them to its widgets first, which is how a finger
tap presses a form button.
"""

from __future__ import annotations
import logging
from typing import Dict, Tuple

import pygame

from core.gestures import (
    Contact, GestureController,
    PointerDown, PointerMove, PointerUp,
    TouchStart, TouchMove, TouchEnd, Wheel,
)

logger = logging.getLogger(__name__)

_FingerKey = Tuple[int, int]   # (touch_id, finger_id)


class PygameGestureAdapter:
    """
    Args:
        controller: Receives the translated events
        canvas_rect: Area of the window that accepts gestures
        window_size: (width, height) of the window, for finger coordinates
    """

    def __init__(self, controller: GestureController,
                 canvas_rect: pygame.Rect, window_size: Tuple[int, int]):
        self.controller = controller
        self.canvas_rect = pygame.Rect(canvas_rect)
        self.window_size = window_size
        self._contacts: Dict[_FingerKey, Contact] = {}

    def resize(self, canvas_rect: pygame.Rect, window_size: Tuple[int, int]):
        self.canvas_rect = pygame.Rect(canvas_rect)
        self.window_size = window_size

    @property
    def active_contacts(self) -> Tuple[Contact, ...]:
        return tuple(self._contacts.values())

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Returns:
            True if the event was consumed by the camera gestures
        """
        t = event.type

        if t in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP,
                 pygame.MOUSEMOTION, pygame.MOUSEWHEEL):
            if getattr(event, "touch", False):
                return False
            return self._mouse(event)

        if t in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            return self._finger(event)

        return False

    # ------------------------------------------------------------------
    def _mouse(self, event) -> bool:
        c = self.controller
        if event.type == pygame.MOUSEWHEEL:
            return c.handle(Wheel(int(event.y)))

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1 or not self.canvas_rect.collidepoint(event.pos):
                return False
            return c.handle(PointerDown(*event.pos))

        if event.type == pygame.MOUSEBUTTONUP:
            if event.button != 1:
                return False
            return c.handle(PointerUp(*event.pos))

        return c.handle(PointerMove(*event.pos))

    def _finger(self, event) -> bool:
        key = (getattr(event, "touch_id", 0), event.finger_id)
        W, H = self.window_size
        contact = Contact(event.x * W, event.y * H)

        if event.type == pygame.FINGERDOWN:
            if not self.canvas_rect.collidepoint(contact.x, contact.y):
                return False
            self._contacts[key] = contact
            logger.debug("finger down %s, %d active", key, len(self._contacts))
            return self.controller.handle(TouchStart(self.active_contacts))

        if key not in self._contacts:
            return False

        if event.type == pygame.FINGERMOTION:
            self._contacts[key] = contact
            return self.controller.handle(TouchMove(self.active_contacts))

        del self._contacts[key]
        return self.controller.handle(TouchEnd(self.active_contacts))
