import pygame as pg
import pytest

import viz.renderer_colors as theme
from core.grid import cell_rect
from core.round_controller import RoundController
from viz.renderer_pygame import PygameRenderer
from viz.renderer_headless import HeadlessRenderer

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def _center(cell, cfg):
    return pg.Rect(cell_rect(cell, cfg)).center

@pytest.fixture
def snap(game_factory):
    return game_factory(food=(20, 3)).snapshot()

def test_open_rejects_config_class():
    from config import AppConfig
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)

def test_draw_requires_surface(snap):
    with pytest.raises(AssertionError):
        PygameRenderer().draw(snap)

def test_draw_fills_background_border_snake_and_food(cfg, screen, snap):
    r = PygameRenderer()
    r.attach_surface(screen, cfg)
    r.draw(snap)
    assert _rgb(screen.get_at((2, 2))) == theme.BG
    assert _rgb(screen.get_at((72, 400))) == theme.FG          # border line
    assert _rgb(screen.get_at((400, 400))) == theme.BG         # empty board cell
    for cell in snap.snake:
        assert _rgb(screen.get_at(_center(cell, cfg))) == theme.FG
    assert _rgb(screen.get_at(_center(snap.food, cfg))) == theme.FOOD

def test_segments_are_rounded(cfg, screen, snap):
    r = PygameRenderer()
    r.attach_surface(screen, cfg)
    r.draw(snap)
    x, y, _, _ = cell_rect(snap.snake[0], cfg)
    assert _rgb(screen.get_at((x, y))) == theme.BG

def test_food_texture_is_used_when_present(cfg, screen, snap, tmp_path):
    img = pg.Surface((12, 12))
    img.fill((10, 20, 250))
    path = tmp_path / "food.png"
    pg.image.save(img, str(path))

    r = PygameRenderer()
    r.attach_surface(screen, cfg.with_(food_image=str(path)))
    r.draw(snap)
    assert _rgb(screen.get_at(_center(snap.food, cfg))) == (10, 20, 250)

def test_record_dir_saves_numbered_frames(cfg, screen, snap, tmp_path):
    r = PygameRenderer()
    r.attach_surface(screen, cfg.with_(record_dir=str(tmp_path)))
    r.draw(snap)
    r.draw(snap)
    assert (tmp_path / "frame_000000.png").exists()
    assert (tmp_path / "frame_000001.png").exists()

def test_headless_renderer_keeps_boards(cfg):
    g = RoundController(cfg)
    r = HeadlessRenderer()
    r.open(cfg)
    r.draw(g.snapshot())
    g.update()
    r.draw(g.snapshot())
    assert r.draw_count == 2
    assert len(r.frames) == 2
    assert r.frames[0].shape == (25, 25, 3)
    assert r.last.ticks == 1
