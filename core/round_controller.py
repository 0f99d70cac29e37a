# core/round_controller.py  (pure rules, no pygame)
from __future__ import annotations
from typing import Callable, Iterable, List, Optional
from config import AppConfig
from .interfaces import Snapshot, RoundResult, Cell, EAT, FAIL, UP, DOWN, LEFT, RIGHT
from .snake_state import SnakeState
from .food import FoodState
from .grid import in_bounds

# order in which several presses within one frame are applied
INPUT_ORDER = (UP, DOWN, LEFT, RIGHT)

class RoundController:
    """Owns the snake, the food and the round state (running flag + score).

    `update()` is the gated tick; `steer()` is applied every frame and
    re-arms a stopped round.
    """
    def __init__(self, cfg: AppConfig, on_round_end: Optional[Callable[[RoundResult], None]] = None):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg.validate()
        self.on_round_end = on_round_end
        self.snake = SnakeState(cfg.start_body, cfg.start_heading)
        self.food = FoodState(cfg.cell_count, cfg.seed)
        self.food.resample(self.snake.body)
        self.running = True
        self.score = 0
        self.ticks = 0
        self.round_index = 0
        self.last_reason: Optional[str] = None

    def new_game(self, seed: Optional[int] = None) -> Snapshot:
        if seed is not None:
            self.food.seed(seed)
        self.snake.reset()
        self.food.resample(self.snake.body)
        self.running = True
        self.score = 0
        self.ticks = 0
        self.round_index = 0
        self.last_reason = None
        return self.snapshot()

    # ---- per tick ----
    def update(self) -> List[str]:
        """Advance one tick if running; returns the events emitted ("eat"/"fail")."""
        events: List[str] = []
        if not self.running:
            return events
        self.snake.advance()
        self.ticks += 1
        self._check_food(events)
        self._check_edges(events)
        self._check_tail(events)
        return events

    def _check_food(self, events: List[str]) -> None:
        if self.snake.head == self.food.position:
            self.food.resample(self.snake.body)
            self.snake.request_growth()
            self.score += 1
            events.append(EAT)

    def _check_edges(self, events: List[str]) -> None:
        if not in_bounds(self.snake.head, self.cfg.cell_count):
            self._game_over("wall", events)

    def _check_tail(self, events: List[str]) -> None:
        body = self.snake.body
        head = body[0]
        if any(body[i] == head for i in range(1, len(body))):
            self._game_over("self", events)

    def _game_over(self, reason: str, events: List[str]) -> None:
        result = RoundResult(round_index=self.round_index, score=self.score, reason=reason, ticks=self.ticks)
        if self.on_round_end is not None:
            self.on_round_end(result)
        self.snake.reset()
        self.food.resample(self.snake.body)
        self.running = False
        self.score = 0
        self.ticks = 0
        self.round_index += 1
        self.last_reason = reason
        events.append(FAIL)

    # ---- per frame ----
    def steer(self, heading: Cell) -> bool:
        accepted = self.snake.set_heading(heading)
        if accepted:
            self.running = True
        return accepted

    def apply_input(self, headings: Iterable[Cell]) -> bool:
        """Apply all presses of one frame; each is checked against the heading the previous one left."""
        pressed = {tuple(h) for h in headings}
        changed = False
        for h in INPUT_ORDER:
            if h in pressed:
                changed = self.steer(h) or changed
        return changed

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.cells(),
            food=self.food.position,
            heading=self.snake.heading,
            score=self.score,
            running=self.running,
            ticks=self.ticks,
            round_index=self.round_index,
            reason=self.last_reason,
            cell_count=self.cfg.cell_count,
        )
