from __future__ import annotations
from typing import Callable, List, Optional


class ManualScheduler:
    """Scheduler driven by hand: nothing fires until fire() is called.

    Keeps every armed period in `history` so callers can check re-arming.
    """
    def __init__(self):
        self.period_ms: Optional[int] = None
        self.history: List[int] = []
        self._callback: Optional[Callable[[], None]] = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, period_ms: int, callback: Callable[[], None]) -> None:
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        self.period_ms = period_ms
        self._callback = callback
        self.history.append(period_ms)

    def disarm(self) -> None:
        self._callback = None
        self.period_ms = None

    def fire(self, n: int = 1) -> int:
        """Invoke the callback up to n times, stopping early if it disarms. Returns calls made."""
        calls = 0
        for _ in range(n):
            if self._callback is None:
                break
            self._callback()
            calls += 1
        return calls
