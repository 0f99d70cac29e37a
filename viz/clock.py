# viz/clock.py
import pygame as pg

class PygameClock:
    def __init__(self):
        self.clock = pg.time.Clock()

    def now(self) -> float:
        """Seconds since pygame.init()."""
        return pg.time.get_ticks() / 1000.0

    def tick(self, fps: int) -> None:
        self.clock.tick(fps)
