# viz/render_iface.py
from __future__ import annotations
from typing import Protocol, Optional
from config import AppConfig
from interfaces import Snapshot

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
