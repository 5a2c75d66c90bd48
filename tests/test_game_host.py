# tests/test_game_host.py
import pytest

from core.game_host import GameHost, START_HINT, PAUSED_TEXT, game_over_text
from interfaces import Command, Phase, UP, RIGHT
from viz.renderer_headless import HeadlessRenderer


class ListRunLog:
    def __init__(self):
        self.rows = []
    def log_run(self, snap):
        self.rows.append(snap)


@pytest.fixture
def host(engine, scheduler, cfg):
    rend = HeadlessRenderer()
    rend.open(cfg)
    h = GameHost(engine, scheduler, renderer=rend, run_log=ListRunLog())
    h.boot()
    return h


def test_boot_draws_idle_board(host, scheduler):
    assert not scheduler.armed
    assert host.renderer.overlay == START_HINT
    assert host.renderer.last.phase is Phase.IDLE
    assert len(host.renderer.frames) == 1

def test_start_arms_at_base_interval(host, scheduler):
    host.handle(Command.START)
    assert scheduler.armed
    assert scheduler.period_ms == 140
    assert host.renderer.overlay is None
    # a second start is ignored
    host.handle(Command.START)
    assert scheduler.history == [140]

def test_timer_advances_and_draws(host, scheduler, place):
    host.handle(Command.START)
    place(host.engine, [(5, 5)], food=(0, 0), direction=RIGHT)
    host.handle(Command.UP)
    assert scheduler.fire() == 1
    assert host.engine.snake == [(5, 4)]
    assert host.renderer.last.snake == ((5, 4),)
    assert host.engine.dir == UP

def test_pause_disarms_and_resume_rearms(host, scheduler):
    host.handle(Command.START)
    host.handle(Command.TOGGLE_PAUSE)
    assert not scheduler.armed
    assert host.renderer.overlay == PAUSED_TEXT
    assert scheduler.fire() == 0
    host.handle(Command.TOGGLE_PAUSE)
    assert scheduler.armed
    assert scheduler.history == [140, 140]
    assert host.renderer.overlay is None

def test_pause_ignored_when_idle(host, scheduler):
    host.handle(Command.TOGGLE_PAUSE)
    assert host.engine.phase is Phase.IDLE
    assert not scheduler.armed

def test_level_up_rearms_faster(host, scheduler, place):
    host.handle(Command.START)
    place(host.engine, [(5, 5)], food=(6, 5), direction=RIGHT)
    host.engine.score = 4
    res = scheduler.fire()
    assert res == 1
    assert host.engine.level == 2
    assert scheduler.period_ms == 130
    assert scheduler.history[-1] == 130

def test_game_over_stops_timer_and_logs(host, scheduler, place):
    host.handle(Command.START)
    place(host.engine, [(9, 5)], food=(0, 0), direction=RIGHT)
    assert scheduler.fire(5) == 1
    assert not scheduler.armed
    assert host.renderer.overlay == game_over_text("wall")
    assert "Hit the wall!" in host.renderer.overlay
    assert [s.reason for s in host.run_log.rows] == ["wall"]

def test_restart_after_game_over(host, scheduler, place):
    host.handle(Command.START)
    place(host.engine, [(9, 5), (8, 5)], food=(0, 0), direction=RIGHT)
    host.engine.score = 2
    scheduler.fire()
    host.handle(Command.RESTART)
    assert host.engine.phase is Phase.RUNNING
    assert host.engine.score == 0
    assert host.engine.snake == [(5, 5)]
    assert scheduler.armed and scheduler.period_ms == 140
    assert [s.score for s in host.run_log.rows] == [2]

def test_mode_toggles(host):
    host.handle(Command.TOGGLE_WRAP)
    assert host.engine.wrap_enabled
    assert host.renderer.last.wrap_enabled
    host.handle(Command.TOGGLE_OBSTACLES)
    assert host.engine.obstacles_enabled
    host.engine.place_obstacles(2)
    host.handle(Command.TOGGLE_OBSTACLES)
    assert host.engine.obstacles == []

def test_quit(host, scheduler):
    host.handle(Command.START)
    assert host.handle(Command.QUIT) is False
    assert not scheduler.armed

def test_headless_grid_tracks_last_frame(host, place):
    from core.featureizers import HEAD, FOOD
    host.handle(Command.START)
    place(host.engine, [(5, 5)], food=(0, 0), direction=RIGHT)
    host.on_timer()
    grid = host.renderer.grid
    assert grid.shape == (10, 10)
    assert grid[5, 6] == HEAD
    assert grid[0, 0] == FOOD

def test_resume_after_level_up_uses_new_interval(host, scheduler, place):
    host.handle(Command.START)
    place(host.engine, [(5, 5)], food=(6, 5), direction=RIGHT)
    host.engine.score = 4
    scheduler.fire()
    assert host.engine.tick_interval_ms == 130

    host.handle(Command.TOGGLE_PAUSE)
    assert not scheduler.armed
    host.handle(Command.TOGGLE_PAUSE)
    assert scheduler.armed
    assert scheduler.period_ms == 130
    assert scheduler.history == [140, 130, 130]
