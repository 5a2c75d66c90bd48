# runners/run_snake.py
from __future__ import annotations
import logging
from typing import Optional
import pygame as pg
from config import AppConfig
from core.game_host import GameHost
from core.highscore import JsonHighScoreStore, MemoryHighScoreStore
from core.run_log import CSVRunLog
from core.snake_rules import GameEngine
from viz.keyboard import Keyboard
from viz.render_iface import Renderer
from viz.renderer_pygame import PygameRenderer
from viz.timer import PygameTimer

log = logging.getLogger(__name__)

def main(cfg: Optional[AppConfig] = None) -> int:
    cfg = (cfg or AppConfig()).validate()

    store = JsonHighScoreStore(cfg.highscore_path) if cfg.highscore_path else MemoryHighScoreStore()
    timer = PygameTimer()
    kbd = Keyboard()
    run_log: Optional[CSVRunLog] = None
    rend: Optional[Renderer] = None

    try:
        run_log = CSVRunLog(cfg.run_log_path) if cfg.run_log_path else None
        rend = PygameRenderer()
        rend.open(cfg)

        engine = GameEngine(cfg, store=store)
        host = GameHost(engine, timer, renderer=rend, run_log=run_log)
        host.boot()
        log.info("snake %dx%d wrap=%s obstacles=%s high=%d",
                 cfg.grid_w, cfg.grid_h, engine.wrap_enabled, engine.obstacles_enabled, engine.high_score)

        running = True
        while running:
            for event in pg.event.get():
                if timer.dispatch(event):
                    continue
                cmd = kbd.translate(event)
                if cmd is not None and not host.handle(cmd):
                    running = False
                    break
            rend.tick(cfg.fps)
    finally:
        if pg.get_init():
            timer.disarm()
        if rend is not None:
            rend.close()
        if run_log is not None:
            run_log.close()
    log.info("bye, high score %d", engine.high_score)
    return 0

if __name__ == "__main__":
    main()
