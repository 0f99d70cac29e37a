# core/snake_state.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Optional, Tuple
from config import AppConfig
from .interfaces import Cell, HEADINGS

class SnakeState:
    """Body cells (head first), heading and a pending-growth flag.

    No bounds checking happens here; an off-grid head is a valid
    intermediate state that the round controller inspects.
    """
    def __init__(self, start_body: Optional[Iterable[Cell]] = None, start_heading: Optional[Cell] = None):
        defaults = AppConfig()
        if start_body is None:
            start_body = defaults.start_body
        if start_heading is None:
            start_heading = defaults.start_heading
        self.start_body = tuple(tuple(c) for c in start_body)
        self.start_heading = tuple(start_heading)
        if not self.start_body:
            raise ValueError("snake needs at least one cell")
        self.body: Deque[Cell] = deque()
        self.heading: Cell = self.start_heading
        self.grow_pending = False
        self.reset()

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, cell) -> bool:
        return tuple(cell) in self.body

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.body)

    def reset(self) -> None:
        self.body = deque(self.start_body)
        self.heading = self.start_heading
        self.grow_pending = False

    def advance(self) -> Cell:
        hx, hy = self.body[0]
        dx, dy = self.heading
        new_head = (hx + dx, hy + dy)
        self.body.appendleft(new_head)
        if self.grow_pending:
            self.grow_pending = False
        else:
            self.body.pop()
        return new_head

    def set_heading(self, heading: Cell) -> bool:
        """Change direction unless it is an instant reversal. Returns True if accepted."""
        heading = tuple(heading)
        if heading not in HEADINGS:
            raise ValueError(f"heading must be one of {HEADINGS}, got {heading}")
        cdx, cdy = self.heading
        if heading == (-cdx, -cdy):
            return False
        self.heading = heading
        return True

    def request_growth(self) -> None:
        self.grow_pending = True
