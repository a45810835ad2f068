"""
High score persistence.

The score lives in a single key-value slot as a decimal string. Backends only
need get/set/remove; the JSON file backend keeps scores across runs and the
memory backend is used by tests and throwaway sessions.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class MemoryBackend:
    """Key-value slots held in a dict"""

    def __init__(self):
        self.data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value

    def remove(self, key: str):
        self.data.pop(key, None)


class JsonFileBackend:
    """Key-value slots stored as one JSON object on disk"""

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Ignoring %s: expected a JSON object", self.path)
            return {}
        return data

    def _save(self, data: Dict[str, str]):
        # Target is only ever replaced whole
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str):
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str):
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class HighScoreStorage:
    """Reads and records the best score"""

    def __init__(self, backend=None, key: str = HIGH_SCORE_KEY):
        self.backend = backend if backend is not None else MemoryBackend()
        self.key = key

    def get_high_score(self) -> int:
        """Stored high score, 0 if unset"""
        raw = self.backend.get(self.key)
        if not raw:
            return 0
        try:
            return int(raw, 10)
        except ValueError:
            logger.warning("Ignoring malformed high score %r", raw)
            return 0

    def set_high_score(self, score: int) -> bool:
        """Store score if it beats the current record, return True if it did"""
        if score > self.get_high_score():
            self.backend.set(self.key, str(int(score)))
            logger.info("New high score: %d", score)
            return True
        return False

    def reset_high_score(self):
        self.backend.remove(self.key)
