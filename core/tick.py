# core/tick.py
from __future__ import annotations
from typing import Optional

class TickScheduler:
    """Fixed-interval gate: decouples the simulation rate from the frame rate."""
    def __init__(self, last_fire_time: Optional[float] = None):
        # None = never fired, so the first check always passes
        self.last_fire_time = last_fire_time

    def should_tick(self, interval: float, now: float) -> bool:
        if self.last_fire_time is None or now - self.last_fire_time >= interval:
            self.last_fire_time = now
            return True
        return False

    def reset(self) -> None:
        self.last_fire_time = None
