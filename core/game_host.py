# core/game_host.py
from __future__ import annotations
import logging
from typing import Optional

from core.featureizers import to_text
from core.snake_rules import GameEngine
from interfaces import (
    Command, COMMAND_DIRS, GAME_OVER_MESSAGES, Phase, Scheduler, Snapshot,
    SnapshotSink, RunLog, TickResult,
)

log = logging.getLogger(__name__)

START_HINT = "Press Enter to start"
PAUSED_TEXT = "Paused"


def game_over_text(reason: str) -> str:
    return f"Game Over: {GAME_OVER_MESSAGES.get(reason, reason)} Press R to restart."


class GameHost:
    """Serialises input commands and timer ticks onto one engine.

    Owns the scheduler cadence: armed while running, disarmed while paused
    or after game over, re-armed whenever the tick interval changes.
    """

    def __init__(self, engine: GameEngine, scheduler: Scheduler,
                 renderer: Optional[SnapshotSink] = None,
                 run_log: Optional[RunLog] = None):
        self.engine = engine
        self.scheduler = scheduler
        self.renderer = renderer
        self.run_log = run_log
        self.overlay: Optional[str] = None

    # ---- lifecycle ----
    def boot(self) -> Snapshot:
        self.scheduler.disarm()
        snap = self.engine.initialize()
        self._show(snap, START_HINT)
        return snap

    def start(self) -> None:
        if self.engine.phase is not Phase.IDLE:
            return
        self.engine.start()
        self._rearm()
        self._show(self.engine.snapshot(), None)

    def restart(self) -> None:
        self.scheduler.disarm()
        self.engine.initialize()
        self.engine.start()
        self._rearm()
        self._show(self.engine.snapshot(), None)

    def toggle_pause(self) -> None:
        if not self.engine.running:
            return
        if self.engine.toggle_pause():
            self.scheduler.disarm()
            self._show(self.engine.snapshot(), PAUSED_TEXT)
        else:
            self._rearm()
            self._show(self.engine.snapshot(), None)

    # ---- input ----
    def handle(self, cmd: Command) -> bool:
        """Apply one input command. Returns False when the player asked to quit."""
        if cmd is Command.QUIT:
            self.scheduler.disarm()
            return False
        if cmd in COMMAND_DIRS:
            self.engine.set_direction(COMMAND_DIRS[cmd])
        elif cmd is Command.START:
            self.start()
        elif cmd is Command.TOGGLE_PAUSE:
            self.toggle_pause()
        elif cmd is Command.RESTART:
            self.restart()
        elif cmd is Command.TOGGLE_WRAP:
            self.engine.set_wrap(not self.engine.wrap_enabled)
            log.info("wrap %s", "on" if self.engine.wrap_enabled else "off")
            self._show(self.engine.snapshot(), self.overlay)
        elif cmd is Command.TOGGLE_OBSTACLES:
            self.engine.set_obstacles_enabled(not self.engine.obstacles_enabled)
            log.info("obstacles %s", "on" if self.engine.obstacles_enabled else "off")
            self._show(self.engine.snapshot(), self.overlay)
        return True

    # ---- timer ----
    def on_timer(self) -> TickResult:
        res = self.engine.tick()
        if not res.advanced:
            return res
        if res.reason is not None:
            self.scheduler.disarm()
            if self.run_log is not None:
                self.run_log.log_run(res.snapshot)
            self._show(res.snapshot, game_over_text(res.reason))
            log.debug("final board:\n%s", "\n".join(to_text(res.snapshot)))
            return res
        if res.leveled_up:
            # old period may fire once more before this lands; harmless
            self._rearm()
        self._show(res.snapshot, self.overlay)
        return res

    # ---- helpers ----
    def _rearm(self) -> None:
        self.scheduler.disarm()
        if self.engine.running and not self.engine.paused:
            self.scheduler.arm(self.engine.tick_interval_ms, self.on_timer)

    def _show(self, snap: Snapshot, overlay: Optional[str]) -> None:
        self.overlay = overlay
        if self.renderer is not None:
            self.renderer.set_overlay(overlay)
            self.renderer.draw(snap)
