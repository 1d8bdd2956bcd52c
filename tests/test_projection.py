"""Tests for the orbit-camera projection."""

from __future__ import annotations

import math

import numpy as np
import pytest

from core.camera import CameraState
from core.projection import (
    project_point,
    project_points,
    rotate_horizontal,
    rotate_vertical,
    to_camera_space,
)
from core.types import ORIGIN, Vec3

W, H = 800, 600
POINTS = [
    Vec3(384400.0, 0.0, 0.0),
    Vec3(-120000.0, 50000.0, 300000.0),
    Vec3(1000.0, -250000.0, -40000.0),
    Vec3(0.0, 0.0, 100000.0),
]


def test_origin_projects_to_viewport_centre() -> None:
    """Earth at the origin lands on the viewport centre for any rotation."""
    cam = CameraState(distance=500000.0, rotation_vertical=1.2, rotation_horizontal=-0.7)
    assert project_point(ORIGIN, cam, W, H) == pytest.approx((400.0, 300.0))


@pytest.mark.parametrize('point', POINTS)
def test_larger_distance_moves_point_towards_centre(point: Vec3) -> None:
    """Increasing camera distance shrinks the offset from centre monotonically."""
    previous = None
    for distance in (900000.0, 1200000.0, 2000000.0, 5000000.0, 2.0e7):
        cam = CameraState(distance=distance)
        sx, sy = project_point(point, cam, W, H)
        offset = math.hypot(sx - W / 2, sy - H / 2)
        if previous is not None:
            assert offset < previous
        previous = offset


@pytest.mark.parametrize('theta', [0.0, 0.3, 1.0, -2.5, math.pi])
def test_zero_horizontal_rotation_is_identity(theta: float) -> None:
    """Vertical rotation then horizontal rotation 0 equals vertical rotation only."""
    for p in POINTS:
        only_vertical = rotate_vertical(p.x, p.y, p.z, theta)
        both = to_camera_space(p, CameraState(rotation_vertical=theta,
                                              rotation_horizontal=0.0))
        assert both == pytest.approx(only_vertical)


def test_full_vertical_turn_equals_no_rotation() -> None:
    for p in POINTS:
        turned = rotate_vertical(p.x, p.y, p.z, 2 * math.pi)
        assert turned == pytest.approx((p.x, p.y, p.z), abs=1e-6)


def test_rotation_order_matters() -> None:
    """Vertical-then-horizontal differs from horizontal-then-vertical."""
    p = Vec3(384400.0, 0.0, 0.0)
    a, b = 0.3, 0.4
    v_then_h = rotate_horizontal(*rotate_vertical(p.x, p.y, p.z, a), b)
    h_then_v = rotate_vertical(*rotate_horizontal(p.x, p.y, p.z, b), a)
    assert v_then_h != pytest.approx(h_then_v)
    assert to_camera_space(p, CameraState(rotation_vertical=a, rotation_horizontal=b)) \
        == pytest.approx(v_then_h)


def test_screen_y_is_inverted() -> None:
    """World +Y is drawn above the centre (smaller screen y)."""
    cam = CameraState(rotation_vertical=0.0, rotation_horizontal=0.0)
    _, sy = project_point(Vec3(0.0, 100000.0, 0.0), cam, W, H)
    assert sy < H / 2


def test_point_behind_camera_is_not_projected() -> None:
    cam = CameraState(distance=100000.0, rotation_vertical=0.0, rotation_horizontal=0.0)
    assert project_point(Vec3(0.0, 0.0, -100000.0), cam, W, H) is None
    assert project_point(Vec3(0.0, 0.0, -200000.0), cam, W, H) is None
    assert project_point(Vec3(0.0, 0.0, -99000.0), cam, W, H) is not None


def test_project_points_matches_scalar_projection() -> None:
    cam = CameraState(distance=750000.0, rotation_vertical=0.8, rotation_horizontal=-0.3)
    arr = np.array([p.as_tuple() for p in POINTS])
    out = project_points(arr, cam, W, H)
    assert out.shape == (len(POINTS), 2)
    for row, p in zip(out, POINTS):
        assert tuple(row) == pytest.approx(project_point(p, cam, W, H))


def test_project_points_marks_hidden_rows_nan() -> None:
    cam = CameraState(distance=100000.0, rotation_vertical=0.0, rotation_horizontal=0.0)
    out = project_points(np.array([[0.0, 0.0, 0.0], [0.0, 0.0, -300000.0]]), cam, W, H)
    assert np.all(np.isfinite(out[0]))
    assert np.all(np.isnan(out[1]))
