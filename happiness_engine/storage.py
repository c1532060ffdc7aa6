"""Key-value persistence for engine history.

The engine stores three JSON-compatible values: the mood history, the task
performance history and the cached optimal-times table. Any store with
``get``/``set`` over those keys can back an engine.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger("happiness_engine.storage")

MOOD_HISTORY_KEY = "mood_history"
TASK_PERFORMANCE_KEY = "task_performance"
OPTIMAL_TIMES_KEY = "optimal_times"


class HistoryStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class InMemoryStore:
    """Dict-backed store, mostly for tests and one-off runs."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store all keys in a single JSON file, rewritten atomically on each set."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Corrupt history file %s, ignoring: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("History file %s does not hold an object, ignoring", self.path)
            return {}
        return data

    def get(self, key: str) -> Any:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        with open(tmp, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, default=str)
        tmp.replace(self.path)
