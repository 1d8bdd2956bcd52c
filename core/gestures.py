"""
Gesture Controller — pointer and touch input -> camera updates.

Input is described by small toolkit-agnostic event records (see
ui/input_adapter.py for the pygame side). Each input path is a pure
transition function

    (session, event, camera) -> (session, camera)

and GestureController owns the camera plus one session per path and applies
the results in place.

Touch path
----------
    Idle     --start(1)--> Rotating(ref)
    Idle     --start(2)--> Pinching(start pinch, start distance)
    Rotating --move(1)---> Rotating     rotation += delta * SENSITIVITY
    Pinching --move(2)---> Pinching     distance = d0 * (p0 / p)
    any      --end-------> Idle

A move whose contact count does not match the mode is ignored.

Mouse path
----------
    Idle --down--> Rotating(ref) --move--> Rotating --up--> Idle

Horizontal pointer motion turns the view around the vertical axis, vertical
motion around the horizontal axis.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, replace
from typing import Tuple, Union

from .camera import CameraState, clamp_distance
from .config import ROTATION_SENSITIVITY, WHEEL_ZOOM_FACTOR

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Contact:
    x: float
    y: float


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    x: float
    y: float


@dataclass(frozen=True)
class TouchStart:
    contacts: Tuple[Contact, ...]   # all contacts active after the start


@dataclass(frozen=True)
class TouchMove:
    contacts: Tuple[Contact, ...]


@dataclass(frozen=True)
class TouchEnd:
    contacts: Tuple[Contact, ...] = ()


@dataclass(frozen=True)
class Wheel:
    steps: int                      # > 0 zoom in, < 0 zoom out


PointerEvent = Union[PointerDown, PointerMove, PointerUp]
TouchEvent = Union[TouchStart, TouchMove, TouchEnd]
GestureEvent = Union[PointerEvent, TouchEvent, Wheel]


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Rotating:
    ref_x: float
    ref_y: float


@dataclass(frozen=True)
class Pinching:
    start_pinch: float      # px between the two contacts at pinch start
    start_distance: float   # camera distance at pinch start


Session = Union[Idle, Rotating, Pinching]
IDLE = Idle()


def pinch_distance(a: Contact, b: Contact) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _rotate(camera: CameraState, session: Rotating,
            x: float, y: float) -> Tuple[Rotating, CameraState]:
    dx = x - session.ref_x
    dy = y - session.ref_y
    camera = replace(
        camera,
        rotation_vertical=camera.rotation_vertical + dx * ROTATION_SENSITIVITY,
        rotation_horizontal=camera.rotation_horizontal + dy * ROTATION_SENSITIVITY,
    )
    return Rotating(x, y), camera


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def touch_transition(session: Session, event: TouchEvent,
                     camera: CameraState) -> Tuple[Session, CameraState]:
    """Advance the touch state machine by one event."""
    if isinstance(event, TouchEnd):
        return IDLE, camera

    contacts = event.contacts

    if isinstance(event, TouchStart):
        if len(contacts) == 1:
            return Rotating(contacts[0].x, contacts[0].y), camera
        if len(contacts) == 2:
            return Pinching(pinch_distance(contacts[0], contacts[1]),
                            camera.distance), camera
        return session, camera

    if isinstance(event, TouchMove):
        if isinstance(session, Rotating) and len(contacts) == 1:
            return _rotate(camera, session, contacts[0].x, contacts[0].y)
        if isinstance(session, Pinching) and len(contacts) == 2:
            current = pinch_distance(contacts[0], contacts[1])
            if current <= 0.0 or session.start_pinch <= 0.0:
                return session, camera
            distance = session.start_distance * (session.start_pinch / current)
            return session, replace(camera, distance=clamp_distance(distance))
        return session, camera

    raise TypeError(f"not a touch event: {event!r}")


def mouse_transition(session: Session, event: PointerEvent,
                     camera: CameraState) -> Tuple[Session, CameraState]:
    """Advance the mouse-drag state machine by one event."""
    if isinstance(event, PointerDown):
        return Rotating(event.x, event.y), camera
    if isinstance(event, PointerUp):
        return IDLE, camera
    if isinstance(event, PointerMove):
        if isinstance(session, Rotating):
            return _rotate(camera, session, event.x, event.y)
        return session, camera
    raise TypeError(f"not a pointer event: {event!r}")


def wheel_zoom(camera: CameraState, steps: int) -> CameraState:
    """Scale the camera distance by WHEEL_ZOOM_FACTOR per wheel step."""
    if steps == 0:
        return camera
    distance = camera.distance * (WHEEL_ZOOM_FACTOR ** steps)
    return replace(camera, distance=clamp_distance(distance))


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class GestureController:
    """
    Owns the view camera and the mouse/touch sessions.

    The camera object is updated in place so anything holding a reference
    to it (the scene renderer) sees the latest state.
    """

    def __init__(self, camera: CameraState = None):
        self.camera = camera if camera is not None else CameraState()
        self.mouse_session: Session = IDLE
        self.touch_session: Session = IDLE

    def handle(self, event: GestureEvent) -> bool:
        """
        Feed one input event.

        Returns:
            True if the event was consumed. Touch moves are always consumed
            so the host can suppress its default scroll/zoom behaviour.
        """
        if isinstance(event, (TouchStart, TouchMove, TouchEnd)):
            session, camera = touch_transition(self.touch_session, event, self.camera)
            self._set_touch(session)
            self._apply(camera)
            return True

        if isinstance(event, (PointerDown, PointerMove, PointerUp)):
            was_dragging = isinstance(self.mouse_session, Rotating)
            session, camera = mouse_transition(self.mouse_session, event, self.camera)
            self.mouse_session = session
            self._apply(camera)
            return was_dragging or isinstance(event, PointerDown)

        if isinstance(event, Wheel):
            self._apply(wheel_zoom(self.camera, event.steps))
            return event.steps != 0

        return False

    @property
    def dragging(self) -> bool:
        return isinstance(self.mouse_session, Rotating)

    def reset_camera(self):
        self._apply(CameraState())
        self.mouse_session = IDLE
        self.touch_session = IDLE

    def _set_touch(self, session: Session):
        if type(session) is not type(self.touch_session):
            logger.debug("touch %s -> %s", type(self.touch_session).__name__,
                         type(session).__name__)
        self.touch_session = session

    def _apply(self, camera: CameraState):
        if camera is self.camera:
            return
        self.camera.distance = camera.distance
        self.camera.rotation_vertical = camera.rotation_vertical
        self.camera.rotation_horizontal = camera.rotation_horizontal
