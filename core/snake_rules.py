# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import List, Optional

from config import AppConfig
from interfaces import (
    Cell, Dir, DIRS, RIGHT, Phase, Snapshot, TickResult, HighScoreStore,
)

log = logging.getLogger(__name__)


class GameEngine:
    """Deterministic Snake state machine, advanced one tick at a time.

    The engine never schedules itself: a host calls ``tick()`` at
    ``tick_interval_ms`` and re-arms its timer when a tick reports
    ``leveled_up``. All calls are expected on a single thread.
    """

    def __init__(self, cfg: AppConfig, store: Optional[HighScoreStore] = None,
                 rng: Optional[random.Random] = None):
        self.cfg = cfg.validate()
        self.store = store
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.wrap_enabled = cfg.wrap_enabled
        self.obstacles_enabled = cfg.obstacles_enabled
        self.high_score = 0
        self.initialize()

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    # ---- lifecycle ----
    def initialize(self) -> Snapshot:
        """Fresh run: centered one-cell snake heading right, new food, level 1."""
        cx, cy = self.cfg.grid_w // 2, self.cfg.grid_h // 2
        self.snake: List[Cell] = [(cx, cy)]
        self.dir: Dir = RIGHT
        self._pending_dir: Dir = RIGHT
        self.obstacles: List[Cell] = []
        self.food: Cell = self.place_food()
        self.score = 0
        self.level = 1
        self.tick_interval_ms = self.cfg.interval_for_level(1)
        self.running = False
        self.paused = False
        self.reason: Optional[str] = None
        self.step_count = 0
        self.high_score = self._load_high_score()
        return self.snapshot()

    def start(self) -> None:
        if self.reason is not None:
            # a finished run needs initialize() first
            return
        if not self.running:
            self.running = True
            self.paused = False

    def pause(self) -> None:
        if self.running and not self.paused:
            self.paused = True

    def resume(self) -> None:
        if self.running and self.paused:
            self.paused = False

    def toggle_pause(self) -> bool:
        if self.running:
            self.paused = not self.paused
        return self.paused

    @property
    def phase(self) -> Phase:
        if self.reason is not None:
            return Phase.GAME_OVER
        if not self.running:
            return Phase.IDLE
        return Phase.PAUSED if self.paused else Phase.RUNNING

    # ---- modes ----
    def set_wrap(self, enabled: bool) -> None:
        self.wrap_enabled = bool(enabled)

    def set_obstacles_enabled(self, enabled: bool) -> None:
        self.obstacles_enabled = bool(enabled)
        if not self.obstacles_enabled:
            self.obstacles = []

    # ---- input ----
    @property
    def pending_dir(self) -> Dir:
        return self._pending_dir

    def set_direction(self, new_dir: Dir) -> bool:
        """Queue a direction for the next tick. Returns False if rejected.

        Compared against the direction the snake last moved in, so several
        presses between ticks can never add up to a 180 degree turn.
        """
        ndx, ndy = new_dir
        if (ndx, ndy) not in DIRS:
            raise ValueError(f"not a unit direction: {new_dir!r}")
        cdx, cdy = self.dir
        if (ndx, ndy) == (cdx, cdy) or (ndx, ndy) == (-cdx, -cdy):
            return False
        self._pending_dir = (ndx, ndy)
        return True

    # ---- step ----
    def tick(self) -> TickResult:
        if not self.running or self.paused:
            return TickResult(snapshot=self.snapshot())

        self.dir = self._pending_dir
        hx, hy = self.snake[0]
        dx, dy = self.dir
        new_head = (hx + dx, hy + dy)
        W, H = self.cfg.grid_w, self.cfg.grid_h

        if self.wrap_enabled:
            new_head = (new_head[0] % W, new_head[1] % H)
        elif not (0 <= new_head[0] < W and 0 <= new_head[1] < H):
            return self._game_over("wall")

        if new_head in self.snake:
            return self._game_over("self")
        if new_head in self.obstacles:
            return self._game_over("obstacle")

        self.step_count += 1
        self.snake.insert(0, new_head)

        ate = leveled_up = new_high = False
        if new_head == self.food:
            ate = True
            self.score += 1
            self.food = self.place_food()

            if self.score % self.cfg.points_per_level == 0:
                leveled_up = True
                self.level += 1
                self.tick_interval_ms = self.cfg.interval_for_level(self.level)
                log.info("level %d reached, tick interval %d ms", self.level, self.tick_interval_ms)
                if self.obstacles_enabled:
                    self.place_obstacles(self.cfg.obstacles_per_level)

            if self.score > self.high_score:
                new_high = True
                self.high_score = self.score
                self._save_high_score()
        else:
            self.snake.pop()

        return TickResult(
            snapshot=self.snapshot(),
            advanced=True,
            ate=ate,
            leveled_up=leveled_up,
            new_high_score=new_high,
        )

    def _game_over(self, reason: str) -> TickResult:
        self.running = False
        self.reason = reason
        log.info("game over (%s) score=%d level=%d", reason, self.score, self.level)
        return TickResult(snapshot=self.snapshot(), advanced=True, reason=reason)

    # ---- placement ----
    def place_food(self) -> Cell:
        """Random free cell; falls back to cfg.food_fallback after too many misses."""
        occ = set(self.snake)
        occ.update(self.obstacles)
        for _ in range(self.cfg.food_attempts):
            cell = (self.rng.randrange(self.cfg.grid_w), self.rng.randrange(self.cfg.grid_h))
            if cell not in occ:
                return cell
        # may overlap the snake or an obstacle when the board is (nearly) full
        log.warning("no free cell for food after %d attempts, using %s",
                    self.cfg.food_attempts, self.cfg.food_fallback)
        return tuple(self.cfg.food_fallback)

    def place_obstacles(self, count: int) -> List[Cell]:
        """Add up to `count` obstacles on free cells. Returns the cells added."""
        occ = set(self.snake)
        occ.update(self.obstacles)
        occ.add(self.food)
        added: List[Cell] = []
        tries = 0
        while len(added) < count and tries < self.cfg.obstacle_attempts:
            tries += 1
            cell = (self.rng.randrange(self.cfg.grid_w), self.rng.randrange(self.cfg.grid_h))
            if cell in occ:
                continue
            occ.add(cell)
            added.append(cell)
        if len(added) < count:
            log.debug("placed %d of %d obstacles", len(added), count)
        self.obstacles.extend(added)
        return added

    # ---- high score ----
    def _load_high_score(self) -> int:
        if self.store is None:
            return self.high_score
        value = self.store.get(self.cfg.highscore_key)
        if value is None or value < 0:
            value = 0
        # never drop below what this process has already seen
        return max(self.high_score, int(value))

    def _save_high_score(self) -> None:
        if self.store is not None:
            self.store.set(self.cfg.highscore_key, self.high_score)

    # ---- views ----
    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            obstacles=tuple(self.obstacles),
            dir=self.dir,
            score=self.score,
            high_score=self.high_score,
            level=self.level,
            tick_interval_ms=self.tick_interval_ms,
            running=self.running,
            paused=self.paused,
            reason=self.reason,
            step_count=self.step_count,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
            wrap_enabled=self.wrap_enabled,
            obstacles_enabled=self.obstacles_enabled,
        )
