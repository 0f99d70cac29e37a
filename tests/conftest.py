# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window or touch a sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    # no asset lookups, fixed seed
    return AppConfig(seed=1234, food_image=None, eat_sound=None, wall_sound=None, music=None, audio=False)

@pytest.fixture
def screen(cfg):
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((cfg.window_px, cfg.window_px))

@pytest.fixture
def game_factory(cfg):
    from core.round_controller import RoundController
    def make(body=None, heading=None, food=None, **kwargs):
        g = RoundController(cfg.with_(**kwargs) if kwargs else cfg)
        if body is not None:
            g.snake.body.clear()
            g.snake.body.extend(tuple(c) for c in body)
        if heading is not None:
            g.snake.heading = tuple(heading)
        if food is not None:
            g.food.position = tuple(food)
        return g
    return make

class RecordingAudio:
    def __init__(self):
        self.calls = []
    def play_eat(self):
        self.calls.append("eat")
    def play_fail(self):
        self.calls.append("fail")
    def restart_music(self):
        self.calls.append("music")
    def close(self):
        self.calls.append("close")

@pytest.fixture
def audio():
    return RecordingAudio()
