# viz/audio.py
from __future__ import annotations
import os
from typing import Optional
import pygame as pg
from config import AppConfig

class PygameAudio:
    """Eat/fail sounds plus a looping music track.

    Missing files or an unavailable mixer leave the game silent; they never stop it.
    """
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self.enabled = False
        self.eat: Optional[pg.mixer.Sound] = None
        self.wall: Optional[pg.mixer.Sound] = None
        self.has_music = False

    def open(self) -> None:
        if not self.cfg.audio:
            return
        try:
            pg.mixer.init()
        except pg.error as e:
            print(f"[audio] mixer unavailable, running silent: {e}")
            return
        self.enabled = True
        self.eat = self._load_sound(self.cfg.eat_sound)
        self.wall = self._load_sound(self.cfg.wall_sound)
        self.has_music = self._load_music(self.cfg.music)
        if self.has_music:
            pg.mixer.music.play(loops=-1)

    def play_eat(self) -> None:
        if self.eat is not None:
            self.eat.play()

    def play_fail(self) -> None:
        if self.wall is not None:
            self.wall.play()

    def restart_music(self) -> None:
        if self.has_music:
            pg.mixer.music.stop()
            pg.mixer.music.play(loops=-1)

    def close(self) -> None:
        if not self.enabled:
            return
        if self.has_music:
            pg.mixer.music.stop()
        pg.mixer.quit()
        self.enabled = False
        self.eat = self.wall = None
        self.has_music = False

    # internals
    def _load_sound(self, path: Optional[str]) -> Optional[pg.mixer.Sound]:
        if not path:
            return None
        if not os.path.exists(path):
            print(f"[audio] missing sound {path!r}")
            return None
        try:
            return pg.mixer.Sound(path)
        except pg.error as e:
            print(f"[audio] could not load {path!r}: {e}")
            return None

    def _load_music(self, path: Optional[str]) -> bool:
        if not path:
            return False
        if not os.path.exists(path):
            print(f"[audio] missing music {path!r}")
            return False
        try:
            pg.mixer.music.load(path)
        except pg.error as e:
            print(f"[audio] could not load {path!r}: {e}")
            return False
        return True

class SilentAudio:
    def play_eat(self) -> None:
        pass
    def play_fail(self) -> None:
        pass
    def restart_music(self) -> None:
        pass
    def close(self) -> None:
        pass
