# interfaces/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Callable, Protocol

Cell = Tuple[int, int]
Dir = Tuple[int, int]

UP: Dir = (0, -1)
DOWN: Dir = (0, 1)
LEFT: Dir = (-1, 0)
RIGHT: Dir = (1, 0)
DIRS = (RIGHT, DOWN, LEFT, UP)

# game over reason -> message shown to the player
GAME_OVER_MESSAGES = {
    "wall": "Hit the wall!",
    "self": "You bit yourself!",
    "obstacle": "Hit an obstacle!",
}

class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"

class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    START = "start"
    TOGGLE_WRAP = "toggle_wrap"
    TOGGLE_OBSTACLES = "toggle_obstacles"
    QUIT = "quit"

COMMAND_DIRS = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
}

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Cell
    obstacles: Tuple[Cell, ...]
    dir: Dir
    score: int
    high_score: int
    level: int
    tick_interval_ms: int
    running: bool
    paused: bool
    reason: str | None
    step_count: int
    grid_w: int
    grid_h: int
    wrap_enabled: bool = False
    obstacles_enabled: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def phase(self) -> Phase:
        if self.reason is not None:
            return Phase.GAME_OVER
        if not self.running:
            return Phase.IDLE
        return Phase.PAUSED if self.paused else Phase.RUNNING

@dataclass(frozen=True)
class TickResult:
    snapshot: Snapshot
    advanced: bool = False        # False when the tick was a no-op (idle/paused/over)
    ate: bool = False
    leveled_up: bool = False
    reason: str | None = None     # set on the tick that ended the run
    new_high_score: bool = False

# ---- collaborators ----
class HighScoreStore(Protocol):
    """Key-value store for a single integer."""
    def get(self, key: str) -> Optional[int]: ...
    def set(self, key: str, value: int) -> None: ...

class Scheduler(Protocol):
    """Invokes a callback every period_ms until disarmed."""
    @property
    def armed(self) -> bool: ...
    def arm(self, period_ms: int, callback: Callable[[], None]) -> None: ...
    def disarm(self) -> None: ...

class SnapshotSink(Protocol):
    def draw(self, snap: Snapshot) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...

class RunLog(Protocol):
    def log_run(self, snap: Snapshot) -> None: ...
