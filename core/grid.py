# core/grid.py  (pure geometry, no pygame)
from __future__ import annotations
from typing import Tuple
from config import AppConfig
from .interfaces import Cell

Rect = Tuple[int, int, int, int]   # x, y, w, h in pixels

def in_bounds(cell: Cell, cell_count: int) -> bool:
    x, y = cell
    return 0 <= x < cell_count and 0 <= y < cell_count

def cell_rect(cell: Cell, cfg: AppConfig) -> Rect:
    """Screen rectangle of a grid cell, shifted by the board offset."""
    x, y = cell
    c = cfg.cell_size
    return (cfg.grid_offset + x * c, cfg.grid_offset + y * c, c, c)

def window_size(cfg: AppConfig) -> Tuple[int, int]:
    return (cfg.window_px, cfg.window_px)

def border_rect(cfg: AppConfig) -> Rect:
    # frame drawn just outside the playable board
    b = cfg.border_px
    return (cfg.grid_offset - b, cfg.grid_offset - b, cfg.board_px + 2 * b, cfg.board_px + 2 * b)

def title_pos(cfg: AppConfig) -> Tuple[int, int]:
    return (cfg.grid_offset - cfg.border_px, 20)

def score_pos(cfg: AppConfig) -> Tuple[int, int]:
    return (cfg.grid_offset - cfg.border_px, cfg.grid_offset + cfg.board_px + 10)
