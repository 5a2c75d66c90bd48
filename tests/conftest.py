# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(grid_w=10, grid_h=10, seed=1234, highscore_path=None)

@pytest.fixture
def store():
    from core.highscore import MemoryHighScoreStore
    return MemoryHighScoreStore()

@pytest.fixture
def engine_factory(cfg, store):
    from core.snake_rules import GameEngine
    def make(store=store, **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        return GameEngine(c, store=store, rng=random.Random(c.seed))
    return make

@pytest.fixture
def engine(engine_factory):
    return engine_factory()

@pytest.fixture
def scheduler():
    from core.scheduler import ManualScheduler
    return ManualScheduler()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((160, 208), pg.SRCALPHA)

@pytest.fixture
def place():
    def _place(engine, snake, food=None, direction=None, obstacles=()):
        """Put an engine into a hand-made position and start it."""
        engine.snake = list(snake)
        if food is not None:
            engine.food = food
        if direction is not None:
            engine.dir = direction
            engine._pending_dir = direction
        engine.obstacles = list(obstacles)
        engine.start()
        return engine
    return _place
