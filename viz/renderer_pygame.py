# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional, Tuple
import pygame as pg
from config import AppConfig
from interfaces import Snapshot
import viz.renderer_colors as theme


def body_alpha(idx: int) -> float:
    """Opacity of the idx-th snake cell (0 = head)."""
    if idx == 0:
        return 1.0
    return max(theme.BODY_MIN_ALPHA, 1 - idx / theme.BODY_FADE_LEN)


class PygameRenderer:
    def __init__(self):
        self.cell = 16
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid_w = 0
        self._grid_h = 0
        self._hud_h = 0
        self._font: Optional[pg.font.Font] = None
        self._overlay_text: Optional[str] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self._hud_h = cfg.render_hud_px if cfg.render_show_hud else 0

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.window_size())
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def window_size(self) -> Tuple[int, int]:
        return self._grid_w * self.cell, self._grid_h * self.cell + self._hud_h

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        surf.fill(theme.BG)

        self._draw_cell(s.food, theme.FOOD)
        for o in s.obstacles:
            self._draw_cell(o, theme.OBSTACLE)
        # tail first so the head ends up on top
        for i in range(len(s.snake) - 1, -1, -1):
            col = theme.HEAD if i == 0 else theme.BODY
            self._draw_cell(s.snake[i], col, body_alpha(i))

        if self._hud_h:
            self._draw_hud(s)
        if self._overlay_text:
            self._draw_overlay()

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface (no window, no flip)."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self._hud_h = cfg.render_hud_px if cfg.render_show_hud else 0
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False

    # internals
    def _draw_cell(self, cell, color, alpha: float = 1.0) -> None:
        c = self.cell
        x, y = cell
        # one pixel gap between tiles
        rect = pg.Rect(x * c, self._hud_h + y * c, c - 1, c - 1)
        if alpha >= 1.0:
            pg.draw.rect(self.surf, color, rect)
            return
        tile = pg.Surface(rect.size, pg.SRCALPHA)
        tile.fill((*color, int(round(alpha * 255))))
        self.surf.blit(tile, rect.topleft)

    def _draw_hud(self, s: Snapshot) -> None:
        surf = self.surf
        pg.draw.rect(surf, theme.HUD_BG, pg.Rect(0, 0, surf.get_width(), self._hud_h))
        font = self._get_font()
        flags = []
        if s.wrap_enabled:
            flags.append("wrap")
        if s.obstacles_enabled:
            flags.append("obstacles")
        txt = font.render(
            f"Score: {s.score}   High: {s.high_score}   Level: {s.level}   {' '.join(flags)}",
            True, theme.TEXT,
        )
        surf.blit(txt, (6, 4))

    def _draw_overlay(self) -> None:
        ovr = self._get_font().render(self._overlay_text, True, theme.MUTED if self._hud_h else theme.TEXT)
        if self._hud_h:
            self.surf.blit(ovr, (6, 26))
            return
        # no HUD strip: centre the message on the board over a dark band
        rect = ovr.get_rect(center=self.surf.get_rect().center)
        pg.draw.rect(self.surf, theme.HUD_BG, rect.inflate(12, 8))
        self.surf.blit(ovr, rect)

    def _get_font(self) -> pg.font.Font:
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        return self._font
