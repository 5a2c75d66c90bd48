from __future__ import annotations
import csv, logging, os
from typing import Any, Dict

from interfaces import Snapshot

log = logging.getLogger(__name__)

RUN_FIELDS = ["run", "score", "level", "reason", "ticks", "high_score", "wrap", "obstacles"]


class CSVRunLog:
    """Append-only CSV history of finished runs, one row per game over."""
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.runs = self._last_run()
        self._file = open(self.path, "a", newline="", encoding="utf-8")
        self._writer = csv.DictWriter(self._file, fieldnames=RUN_FIELDS, extrasaction="ignore")
        if self._file.tell() == 0:
            self._writer.writeheader()

    def _last_run(self) -> int:
        """Highest run number already in the file, so sessions keep counting."""
        if not os.path.exists(self.path):
            return 0
        last = 0
        with open(self.path, newline="", encoding="utf-8") as f:
            for row in csv.DictReader(f):
                try:
                    last = max(last, int(row.get("run") or 0))
                except ValueError:
                    continue
        return last

    def log_run(self, snap: Snapshot) -> None:
        self.runs += 1
        row: Dict[str, Any] = {
            "run": self.runs,
            "score": snap.score,
            "level": snap.level,
            "reason": snap.reason or "",
            "ticks": snap.step_count,
            "high_score": snap.high_score,
            "wrap": int(snap.wrap_enabled),
            "obstacles": int(snap.obstacles_enabled),
        }
        self._writer.writerow(row)
        self._file.flush()

    def close(self) -> None:
        try:
            self._file.close()
        except OSError as e:
            log.warning("closing run log %s failed: %s", self.path, e)
