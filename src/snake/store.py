# store.py
from __future__ import annotations
from typing import Dict, Protocol
import json
import logging
import os
import tempfile

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Key-value store for values that outlive a game (the best score)."""

    def get(self, key: str, default: int = 0) -> int: ...
    def set(self, key: str, value: int) -> None: ...


class MemoryStore:
    """Dict-backed store; forgets everything when the process exits."""

    def __init__(self, initial: Dict[str, int] | None = None):
        self.values: Dict[str, int] = dict(initial or {})

    def get(self, key: str, default: int = 0) -> int:
        return self.values.get(key, default)

    def set(self, key: str, value: int) -> None:
        self.values[key] = int(value)


class JsonFileStore:
    """
    Store kept as a flat JSON object in a single file.

    A missing or unreadable file reads as empty. Writes replace the file
    atomically so a crash never leaves half a JSON document behind.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, object]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str, default: int = 0) -> int:
        value = self._load().get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-integer %r for %r in %s", value, key, self.path)
            return default

    def set(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)

        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=directory, prefix=".snake-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp, self.path)
        except OSError:
            os.unlink(tmp)
            raise
