# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from config import AppConfig
from core.featureizers import encode_cells
from interfaces import Snapshot

class HeadlessRenderer:
    """Renderer without a window: remembers every frame and the last board grid."""
    def __init__(self):
        self.frames: List[Snapshot] = []
        self.overlay: Optional[str] = None
        self.grid: Optional[np.ndarray] = None
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames.clear()
        self.grid = np.zeros((cfg.grid_h, cfg.grid_w), dtype=np.int8)

    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
        self.grid = encode_cells(snap)

    def set_overlay(self, text: Optional[str]) -> None:
        self.overlay = text or None

    @property
    def last(self) -> Optional[Snapshot]:
        return self.frames[-1] if self.frames else None

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass
