# core/food.py
from __future__ import annotations
import random
from typing import Iterable, Optional
from .interfaces import Cell
from .grid import in_bounds

class BoardFullError(RuntimeError):
    """Raised when every cell is occupied, so no food cell can exist."""

class FoodState:
    def __init__(self, cell_count: int, seed: Optional[int] = None):
        self.cell_count = cell_count
        self.rng = random.Random(seed)
        self.position: Cell = (0, 0)

    def seed(self, seed: Optional[int]) -> None:
        self.rng = random.Random(seed)

    def random_cell(self) -> Cell:
        n = self.cell_count
        return (self.rng.randint(0, n - 1), self.rng.randint(0, n - 1))

    def resample(self, excluded: Iterable[Cell]) -> Cell:
        """Rejection-sample a uniform free cell and make it the new position."""
        occ = {tuple(c) for c in excluded}
        occupied_in_grid = sum(1 for c in occ if in_bounds(c, self.cell_count))
        if occupied_in_grid >= self.cell_count * self.cell_count:
            raise BoardFullError(f"no free cell left on a {self.cell_count}x{self.cell_count} grid")

        cell = self.random_cell()
        while cell in occ:
            cell = self.random_cell()
        self.position = cell
        return cell
