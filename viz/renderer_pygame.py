# viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Optional, Union
from config import AppConfig
from core.interfaces import Snapshot
from core.grid import cell_rect, border_rect, title_pos, score_pos, window_size
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._food_tex: Optional[pg.Surface] = None
        self._title_font: Optional[pg.font.Font] = None
        self._score_font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.title)
        self.surf = pg.display.set_mode(window_size(cfg))
        self._auto_flip = True
        self._frame_idx = 0
        self._load_assets()

        if cfg.record_dir:
            os.makedirs(cfg.record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto an existing surface; the owner handles flipping."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self._auto_flip = False
        self._load_assets()

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        cfg = self.cfg

        surf.fill(theme.BG)
        pg.draw.rect(surf, theme.FG, pg.Rect(border_rect(cfg)), width=cfg.border_px)

        title = self._title_font.render(cfg.title, True, theme.FG)
        surf.blit(title, title_pos(cfg))
        self.draw_score(s.score)
        self.draw_food(s.food)
        self.draw_snake(s.snake)

        if self._auto_flip:
            pg.display.flip()

        if cfg.record_dir:
            self._save_surface_frame()

    def draw_score(self, score: int) -> None:
        txt = self._score_font.render(f"Score: {score}", True, theme.FG)
        self.surf.blit(txt, score_pos(self.cfg))

    def draw_food(self, cell) -> None:
        rect = pg.Rect(cell_rect(cell, self.cfg))
        if self._food_tex is not None:
            self.surf.blit(self._food_tex, rect.topleft)
        else:
            pg.draw.rect(self.surf, theme.FOOD, rect, border_radius=self._radius())

    def draw_snake(self, cells) -> None:
        radius = self._radius()
        for cell in cells:
            pg.draw.rect(self.surf, theme.FG, pg.Rect(cell_rect(cell, self.cfg)), border_radius=radius)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._food_tex = None

    # internals
    def _radius(self) -> int:
        return int(self.cfg.segment_roundness * self.cfg.cell_size / 2)

    def _load_assets(self) -> None:
        self._title_font = pg.font.SysFont(None, self.cfg.title_font_px)
        self._score_font = pg.font.SysFont(None, self.cfg.score_font_px)
        self._food_tex = None
        path = self.cfg.food_image
        if path and os.path.exists(path):
            try:
                tex = pg.image.load(path)
            except pg.error as e:
                print(f"[render] could not load food image {path!r}: {e}")
            else:
                c = self.cfg.cell_size
                self._food_tex = pg.transform.scale(tex, (c, c))

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
