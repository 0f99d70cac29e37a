# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Protocol, Optional

Cell = Tuple[int, int]

# ----- Headings (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
HEADINGS: Tuple[Cell, ...] = (UP, DOWN, LEFT, RIGHT)

EAT = "eat"
FAIL = "fail"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Cell
    heading: Cell
    score: int
    running: bool
    ticks: int
    round_index: int
    reason: str | None
    cell_count: int

@dataclass(frozen=True)
class RoundResult:
    round_index: int
    score: int
    reason: str       # "wall" | "self"
    ticks: int

@dataclass(frozen=True)
class FrameInput:
    quit: bool = False
    headings: Tuple[Cell, ...] = ()   # presses this frame, in key order


# ----- collaborator side (window / audio / input / time) -----
class Clock(Protocol):
    def now(self) -> float: ...
    def tick(self, fps: int) -> None: ...

class InputSource(Protocol):
    def poll(self) -> FrameInput: ...

class Audio(Protocol):
    def play_eat(self) -> None: ...
    def play_fail(self) -> None: ...
    def restart_music(self) -> None: ...
    def close(self) -> None: ...

class Renderer(Protocol):
    def open(self, cfg) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...

class RoundSink(Protocol):
    def log_round(self, result: RoundResult, elapsed: Optional[float] = None) -> None: ...
