# core/board.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Snapshot
from .grid import in_bounds

# channel layout of encode(): body, head, food
BODY, HEAD, FOOD = 0, 1, 2

def encode(s: Snapshot) -> np.ndarray:
    """(H, W, 3) float32 occupancy grid of a snapshot."""
    n = s.cell_count
    grid = np.zeros((n, n, 3), dtype=np.float32)
    for (x, y) in s.snake[1:]:
        if in_bounds((x, y), n):
            grid[y, x, BODY] = 1.0
    hx, hy = s.snake[0]
    if in_bounds((hx, hy), n):
        grid[hy, hx, HEAD] = 1.0
    fx, fy = s.food
    grid[fy, fx, FOOD] = 1.0
    return grid

def to_text(s: Snapshot) -> List[str]:
    n = s.cell_count
    rows = [["." for _ in range(n)] for _ in range(n)]
    fx, fy = s.food
    rows[fy][fx] = "F"
    for (x, y) in s.snake[1:]:
        if in_bounds((x, y), n):
            rows[y][x] = "o"
    hx, hy = s.snake[0]
    if in_bounds((hx, hy), n):
        rows[hy][hx] = "H"
    return ["".join(r) for r in rows]
