# viz/keyboard.py
import pygame as pg
from core.interfaces import FrameInput, UP, DOWN, LEFT, RIGHT

KEYMAP = {
    pg.K_w: UP, pg.K_UP: UP,
    pg.K_s: DOWN, pg.K_DOWN: DOWN,
    pg.K_a: LEFT, pg.K_LEFT: LEFT,
    pg.K_d: RIGHT, pg.K_RIGHT: RIGHT,
}

class Keyboard:
    """Directional keys pressed this frame (edge-triggered, like KEYDOWN)."""
    def __init__(self, keymap=None):
        self.keymap = dict(KEYMAP if keymap is None else keymap)

    def poll(self) -> FrameInput:
        quit_ = False
        pressed = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                quit_ = True
            elif e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE:
                    quit_ = True
                elif e.key in self.keymap and self.keymap[e.key] not in pressed:
                    pressed.append(self.keymap[e.key])
        return FrameInput(quit=quit_, headings=tuple(pressed))
