# viz/renderer_headless.py
from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import numpy as np
from config import AppConfig
from core.interfaces import Snapshot, FrameInput, Cell
from core.board import encode

class HeadlessRenderer:
    """Keeps every drawn frame as a numpy board instead of opening a window."""
    def __init__(self, keep_frames: bool = True):
        self.keep_frames = keep_frames
        self.cfg: Optional[AppConfig] = None
        self.frames: List[np.ndarray] = []
        self.last: Optional[Snapshot] = None
        self.draw_count = 0

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = []
        self.draw_count = 0

    def draw(self, snap: Snapshot) -> None:
        self.last = snap
        self.draw_count += 1
        if self.keep_frames:
            self.frames.append(encode(snap))

    def close(self) -> None:
        pass

class SimClock:
    """Simulated time: each tick(fps) advances by exactly 1/fps seconds."""
    def __init__(self, start: float = 0.0):
        self.t = start

    def now(self) -> float:
        return self.t

    def tick(self, fps: int) -> None:
        self.t += 1.0 / fps

class ScriptedInput:
    """Replays directional presses keyed by frame index, then quits after max_frames."""
    def __init__(self, script: Optional[Dict[int, Sequence[Cell]]] = None, max_frames: Optional[int] = None):
        self.script = {int(k): tuple(tuple(h) for h in v) for k, v in (script or {}).items()}
        self.max_frames = max_frames
        self.frame = 0

    def poll(self) -> FrameInput:
        i = self.frame
        self.frame += 1
        if self.max_frames is not None and i >= self.max_frames:
            return FrameInput(quit=True)
        return FrameInput(headings=self.script.get(i, ()))
