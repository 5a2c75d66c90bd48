# tests/test_run_snake.py
import pytest

from config import AppConfig
import runners.run_snake as run_snake


def test_failed_window_setup_still_cleans_up(monkeypatch, tmp_path):
    closed = []

    class NoDisplay(run_snake.PygameRenderer):
        def open(self, cfg):
            raise RuntimeError("no display")
        def close(self):
            closed.append("renderer")

    class TrackedLog(run_snake.CSVRunLog):
        def close(self):
            closed.append("run_log")
            super().close()

    monkeypatch.setattr(run_snake, "PygameRenderer", NoDisplay)
    monkeypatch.setattr(run_snake, "CSVRunLog", TrackedLog)
    cfg = AppConfig(highscore_path=None, run_log_path=str(tmp_path / "runs.csv"))
    with pytest.raises(RuntimeError, match="no display"):
        run_snake.main(cfg)
    assert sorted(closed) == ["renderer", "run_log"]
