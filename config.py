# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from core.interfaces import Cell, RIGHT

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    cell_size: int = 30
    cell_count: int = 25
    grid_offset: int = 75
    start_body: Tuple[Cell, ...] = ((6, 9), (5, 9), (4, 9))
    start_heading: Cell = RIGHT
    seed: Optional[int] = None

    # timing
    tick_interval: float = 0.2
    fps: int = 60

    # render
    title: str = "Snake"
    border_px: int = 5
    title_font_px: int = 40
    score_font_px: int = 40
    segment_roundness: float = 0.5
    record_dir: Optional[str] = None

    # assets
    food_image: Optional[str] = "Graphics/food.png"
    eat_sound: Optional[str] = "Sounds/eat.mp3"
    wall_sound: Optional[str] = "Sounds/wall.mp3"
    music: Optional[str] = "Sounds/music.mp3"
    audio: bool = True

    # logging
    round_log_path: Optional[str] = None
    verbose: bool = False

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    @property
    def board_px(self) -> int:
        return self.cell_size * self.cell_count

    @property
    def window_px(self) -> int:
        return 2 * self.grid_offset + self.board_px

    def validate(self) -> "AppConfig":
        if self.cell_size <= 0 or self.cell_count <= 0:
            raise ValueError(f"cell_size and cell_count must be positive, got {self.cell_size}, {self.cell_count}")
        if self.grid_offset < 0:
            raise ValueError(f"grid_offset must be >= 0, got {self.grid_offset}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not self.start_body:
            raise ValueError("start_body needs at least one cell")
        for x, y in self.start_body:
            if not (0 <= x < self.cell_count and 0 <= y < self.cell_count):
                raise ValueError(f"start cell {(x, y)} is outside a {self.cell_count}x{self.cell_count} grid")
        return self
