from __future__ import annotations
import json, logging, os
from typing import Dict, Optional

log = logging.getLogger(__name__)


class MemoryHighScoreStore:
    """In-process store; nothing survives the process."""
    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._data: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return self._data.get(key)

    def set(self, key: str, value: int) -> None:
        self._data[key] = int(value)


class JsonHighScoreStore:
    """Integers keyed by name in a small JSON object file.

    Read problems (missing file, bad JSON, non-integer value) read as absent;
    write problems are logged. Neither ever raises into the game loop.
    """
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _read(self) -> Dict[str, object]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("could not read high scores from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring high score file %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[int]:
        value = self._read().get(key)
        if value is None:
            return None
        # bool is an int subclass; "true" is not a score
        if isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            log.warning("ignoring non-integer high score %r for %s", value, key)
            return None

    def set(self, key: str, value: int) -> None:
        data = self._read()
        data[key] = int(value)
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            tmp = self.path + ".tmp"
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp, self.path)
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)
