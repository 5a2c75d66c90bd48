# viz/timer.py
from __future__ import annotations
from typing import Callable, Optional
import pygame as pg

TICK_EVENT = pg.USEREVENT + 1


class PygameTimer:
    """Scheduler on top of pygame.time.set_timer.

    pygame posts TICK_EVENT every period; the main loop hands events to
    dispatch(), which runs the callback. Re-arming replaces the old timer.
    """
    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.period_ms: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, period_ms: int, callback: Callable[[], None]) -> None:
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        self._callback = callback
        self.period_ms = period_ms
        pg.time.set_timer(self.event_type, period_ms)

    def disarm(self) -> None:
        pg.time.set_timer(self.event_type, 0)
        self._callback = None
        self.period_ms = None

    def dispatch(self, event: pg.event.Event) -> bool:
        """Run the callback for our own events. Returns True if the event was ours."""
        if event.type != self.event_type:
            return False
        # a tick may still be queued after disarm
        if self._callback is not None:
            self._callback()
        return True
