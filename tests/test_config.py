"""Tests for runtime configuration, CLI parsing and logging setup."""

from __future__ import annotations

import importlib
import logging
import os
from pathlib import Path

import pytest

from core.config import HEIGHT, WIDTH, AppConfig
from core.logging_config import setup_logging


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ('TRAJVIEW_WIDTH', 'TRAJVIEW_HEIGHT', 'TRAJVIEW_EXPORT_DIR'):
        monkeypatch.delenv(name, raising=False)
    cfg = AppConfig.from_env()
    assert (cfg.width, cfg.height) == (WIDTH, HEIGHT)
    assert cfg.export_dir == Path('.')


def test_from_env_reads_variables_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('TRAJVIEW_WIDTH', '1024')
    monkeypatch.setenv('TRAJVIEW_HEIGHT', '700')
    monkeypatch.setenv('TRAJVIEW_EXPORT_DIR', '/tmp/out')
    cfg = AppConfig.from_env(height=600, launch_date=None)
    assert cfg.width == 1024
    assert cfg.height == 600
    assert cfg.export_dir == Path('/tmp/out')
    assert cfg.launch_date == ''


def test_from_env_rejects_bad_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('TRAJVIEW_WIDTH', 'wide')
    with pytest.raises(ValueError, match='TRAJVIEW_WIDTH'):
        AppConfig.from_env()


def test_cli_parser() -> None:
    main_app = pytest.importorskip('main_app')
    args = main_app.build_parser().parse_args(
        ['--width', '900', '--date', '2024-02-01', '--time', '06:00', '--log-level', 'DEBUG'])
    assert args.width == 900
    assert args.height is None
    assert (args.date, args.time) == ('2024-02-01', '06:00')
    assert args.log_level == 'DEBUG'


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / 'viewer.log'
    setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger('core.gestures').debug('touch Idle -> Rotating')
    for handler in logging.getLogger('core').handlers:
        handler.flush()
    text = log_file.read_text(encoding='utf-8')
    assert 'core.gestures - DEBUG - touch Idle -> Rotating' in text

    setup_logging(logging.INFO)
    assert len(logging.getLogger('core').handlers) == 1


def test_setup_logging_closes_previous_log_file(tmp_path: Path) -> None:
    setup_logging(logging.INFO, str(tmp_path / 'first.log'))
    first = [h for h in logging.getLogger('core').handlers
             if isinstance(h, logging.FileHandler)]
    assert len(first) == 1

    setup_logging(logging.INFO)
    assert first[0].stream is None
    assert first[0] not in logging.getLogger('ui').handlers


def test_main_app_keeps_touch_mouse_synthesis(monkeypatch: pytest.MonkeyPatch) -> None:
    """Form widgets rely on SDL turning finger taps into mouse clicks."""
    main_app = pytest.importorskip('main_app')
    monkeypatch.delenv('SDL_TOUCH_MOUSE_EVENTS', raising=False)
    importlib.reload(main_app)
    assert 'SDL_TOUCH_MOUSE_EVENTS' not in os.environ
