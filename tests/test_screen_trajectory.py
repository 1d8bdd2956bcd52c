"""Headless tests for the trajectory screen (form, compute, export, render)."""

from __future__ import annotations

from pathlib import Path

import pytest

pygame = pytest.importorskip('pygame')

from core.config import AppConfig
from core.gestures import Rotating
from ui.screen_trajectory import SIDEBAR_W, TrajectoryScreen
from universe import DEFAULT_MOON_POSITION, moon_position_jd


@pytest.fixture(scope='module')
def headless():
    # Not quit afterwards: the theme caches fonts for the whole process
    pygame.init()


@pytest.fixture
def screen(headless, tmp_path: Path) -> TrajectoryScreen:
    cfg = AppConfig(export_dir=tmp_path, launch_date='2023-07-14', launch_time='14:35')
    return TrajectoryScreen(cfg, (1024, 768))


def test_starts_with_default_moon(screen: TrajectoryScreen) -> None:
    assert screen.moon == DEFAULT_MOON_POSITION
    assert screen.result is None


def test_compute_places_moon_and_fills_results(screen: TrajectoryScreen) -> None:
    screen.compute()
    assert screen.result is not None
    # 14:35 IST -> 09:05 UTC on 2023-07-14
    assert screen.result.jd == pytest.approx(2460139.8784722, abs=1e-6)
    assert screen.moon == moon_position_jd(screen.result.jd)
    assert screen.track is not None
    assert screen.results.get_text().startswith('Launch JD (UTC): 2460139.87847')


def test_compute_with_bad_input_shows_error(screen: TrajectoryScreen) -> None:
    screen.fields['date'].set_text('')
    screen.compute()
    assert screen.result is None
    assert 'Enter launch date and time' in screen.results.get_text()

    screen.fields['date'].set_text('2023-07-14')
    screen.fields['apogee'].set_text('far')
    screen.compute()
    assert screen.result is None
    assert 'Apogee' in screen.results.get_text()


def test_csv_export_requires_compute(screen: TrajectoryScreen, tmp_path: Path) -> None:
    screen.save_csv()
    assert not (tmp_path / 'trajectory.csv').exists()
    screen.compute()
    screen.save_csv()
    assert (tmp_path / 'trajectory.csv').exists()
    assert 'Saved' in screen.results.get_text()


def test_svg_export(screen: TrajectoryScreen, tmp_path: Path) -> None:
    screen.save_svg()
    svg = (tmp_path / 'trajectory.svg').read_text(encoding='utf-8')
    assert svg.count('<circle') == 2


def test_export_failure_is_reported(headless, tmp_path: Path) -> None:
    cfg = AppConfig(export_dir=tmp_path / 'missing')
    view = TrajectoryScreen(cfg, (1024, 768))
    view.save_svg()
    assert 'Could not write' in view.results.get_text()


def test_render_draws_scene_in_canvas_area(screen: TrajectoryScreen) -> None:
    surface = pygame.Surface((1024, 768))
    screen.render(surface)
    earth = screen.renderer.last_earth
    canvas = screen.canvas_rect
    assert earth == pytest.approx((canvas.width / 2, canvas.height / 2))
    x, y = SIDEBAR_W + int(earth[0]), int(earth[1]) + 5
    assert surface.get_at((x, y))[:3] == (0, 0, 255)


def test_mouse_drag_on_canvas_rotates_camera(screen: TrajectoryScreen) -> None:
    cam = screen.gestures.camera
    start = cam.rotation_vertical
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(600, 300), button=1, touch=False),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(640, 300), rel=(40, 0),
                           buttons=(1, 0, 0), touch=False),
    ]
    screen.handle_input(events)
    assert isinstance(screen.gestures.mouse_session, Rotating)
    assert cam.rotation_vertical == pytest.approx(start + 0.2)


def test_click_in_sidebar_does_not_rotate(screen: TrajectoryScreen) -> None:
    cam = screen.gestures.camera.copy()
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(20, 700), button=1, touch=False),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(80, 700), rel=(60, 0),
                           buttons=(1, 0, 0), touch=False),
    ]
    screen.handle_input(events)
    assert screen.gestures.camera == cam


def test_escape_quits_and_r_resets(screen: TrajectoryScreen) -> None:
    screen.gestures.camera.distance = 123456.0
    r = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r, unicode='r', mod=0)
    assert screen.handle_input([r]) is None
    assert screen.gestures.camera.distance == 900000.0

    esc = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, unicode='\x1b', mod=0)
    assert screen.handle_input([esc]) == 'QUIT'


def _tap(pos, drag: bool = False) -> list:
    # What SDL delivers for a finger tap when touch->mouse synthesis is on
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1, touch=True)]
    if drag:
        events.append(pygame.event.Event(pygame.MOUSEMOTION, pos=(pos[0] + 50, pos[1]),
                                         rel=(50, 0), buttons=(1, 0, 0), touch=True))
    events.append(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1, touch=True))
    return events


def test_finger_tap_presses_form_button(screen: TrajectoryScreen) -> None:
    screen.handle_input(_tap(screen.buttons['compute'].rect.center))
    assert screen.result is not None


def test_synthesised_mouse_on_canvas_does_not_rotate(screen: TrajectoryScreen) -> None:
    cam = screen.gestures.camera.copy()
    screen.handle_input(_tap((600, 300), drag=True))
    assert screen.gestures.camera == cam
    assert not screen.gestures.dragging


def _record_text(monkeypatch: pytest.MonkeyPatch, screen: TrajectoryScreen) -> list:
    drawn = []
    monkeypatch.setattr(screen.theme, 'draw_text',
                        lambda surface, font, x, y, text, color, align='left':
                        drawn.append(text))
    return drawn


def test_save_notice_is_drawn_below_results(screen: TrajectoryScreen, tmp_path: Path,
                                            monkeypatch: pytest.MonkeyPatch) -> None:
    screen.compute()
    screen.save_csv()
    drawn = _record_text(monkeypatch, screen)
    screen.results.draw(pygame.Surface((1024, 768)))
    assert drawn[1].startswith('Launch JD (UTC)')
    assert drawn[-1] == f"Saved {tmp_path / 'trajectory.csv'}"


def test_hud_shows_mean_elements_after_compute(screen: TrajectoryScreen,
                                               monkeypatch: pytest.MonkeyPatch) -> None:
    drawn = _record_text(monkeypatch, screen)
    screen.render(pygame.Surface((1024, 768)))
    assert not any(t.startswith('MOON M') for t in drawn)

    screen.compute()
    drawn.clear()
    screen.render(pygame.Surface((1024, 768)))
    longitude = f"L {screen.elements.mean_longitude_deg:.2f} deg"
    assert any(t.startswith('MOON M') and t.endswith(longitude) for t in drawn)
