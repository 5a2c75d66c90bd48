# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 25
    grid_h: int = 25
    seed: Optional[int] = None

    # speed / levels
    base_interval_ms: int = 140      # ms per tick at level 1 (lower = faster)
    speed_step_ms: int = 10          # ms shaved off per level
    min_interval_ms: int = 30
    points_per_level: int = 5
    obstacles_per_level: int = 1

    # random placement
    food_attempts: int = 500
    obstacle_attempts: int = 1000
    food_fallback: Tuple[int, int] = (0, 0)

    # modes (owned by the caller, never touched by initialize)
    wrap_enabled: bool = False
    obstacles_enabled: bool = False

    # persistence
    highscore_key: str = "snake_high"
    highscore_path: Optional[str] = "~/.snake/highscore.json"
    run_log_path: Optional[str] = None

    # render
    fps: int = 60
    render_cell: int = 16
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_hud_px: int = 48

    log_level: str = "INFO"

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        if self.grid_w < 1 or self.grid_h < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.grid_w}x{self.grid_h}")
        if self.base_interval_ms < 1 or self.min_interval_ms < 1:
            raise ValueError("tick intervals must be positive")
        if self.min_interval_ms > self.base_interval_ms:
            raise ValueError(
                f"min_interval_ms ({self.min_interval_ms}) exceeds base_interval_ms ({self.base_interval_ms})"
            )
        if self.speed_step_ms < 0:
            raise ValueError("speed_step_ms must be >= 0")
        if self.points_per_level < 1:
            raise ValueError("points_per_level must be >= 1")
        if self.obstacles_per_level < 0:
            raise ValueError("obstacles_per_level must be >= 0")
        if self.food_attempts < 0 or self.obstacle_attempts < 0:
            raise ValueError("placement attempts must be >= 0")
        fx, fy = self.food_fallback
        if not (0 <= fx < self.grid_w and 0 <= fy < self.grid_h):
            raise ValueError(f"food_fallback {self.food_fallback} is outside the grid")
        return self

    def interval_for_level(self, level: int) -> int:
        return max(self.min_interval_ms, self.base_interval_ms - (level - 1) * self.speed_step_ms)
