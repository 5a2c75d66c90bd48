# viz/keyboard.py
from typing import Optional
import pygame as pg
from interfaces import Command

KEYMAP = {
    pg.K_UP: Command.UP, pg.K_w: Command.UP,
    pg.K_DOWN: Command.DOWN, pg.K_s: Command.DOWN,
    pg.K_LEFT: Command.LEFT, pg.K_a: Command.LEFT,
    pg.K_RIGHT: Command.RIGHT, pg.K_d: Command.RIGHT,
    pg.K_SPACE: Command.TOGGLE_PAUSE, pg.K_p: Command.TOGGLE_PAUSE,
    pg.K_r: Command.RESTART,
    pg.K_RETURN: Command.START, pg.K_KP_ENTER: Command.START,
    pg.K_t: Command.TOGGLE_WRAP,
    pg.K_o: Command.TOGGLE_OBSTACLES,
    pg.K_ESCAPE: Command.QUIT,
}

class Keyboard:
    def __init__(self, keymap=None):
        self.keymap = dict(KEYMAP if keymap is None else keymap)

    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return Command.QUIT
        if e.type == pg.KEYDOWN:
            return self.keymap.get(e.key)
        return None

