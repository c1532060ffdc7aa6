"""Mood-aware scheduling engine.

``HappinessEngine`` owns one user's mood and task performance history. Every
recording call appends to the history, recomputes the optimal-times table
from scratch and persists everything through the injected store before it
returns. Read operations work on the in-memory history and never fail: with
no data they fall back to neutral defaults.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Optional

from happiness_engine.catalog import TASK_TYPES, default_hour, resolve_task_type, time_of_day
from happiness_engine.metrics import mood_stats, performance_summary
from happiness_engine.optimal_times import compute_optimal_times
from happiness_engine.recommendations import current_recommendations
from happiness_engine.schema import (
    MoodEnergyObservation,
    PerformanceMetrics,
    TaskPerformanceRecord,
    UserPreferences,
)
from happiness_engine.scoring import score_task
from happiness_engine.storage import (
    MOOD_HISTORY_KEY,
    OPTIMAL_TIMES_KEY,
    TASK_PERFORMANCE_KEY,
    HistoryStore,
    InMemoryStore,
)
from happiness_engine.window import find_optimal_productivity_window

logger = logging.getLogger("happiness_engine.engine")

INSUFFICIENT_DATA_REASON = "Using default time due to insufficient data"


class HappinessEngine:
    def __init__(
        self,
        preferences: UserPreferences | dict | None = None,
        store: Optional[HistoryStore] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if not isinstance(preferences, UserPreferences):
            preferences = UserPreferences.from_dict(preferences)
        self.preferences = preferences
        self.store = store if store is not None else InMemoryStore()
        self._clock = clock
        self._lock = threading.Lock()

        self._observations: list[MoodEnergyObservation] = self._load_list(
            MOOD_HISTORY_KEY, MoodEnergyObservation.from_dict
        )
        self._performance: list[TaskPerformanceRecord] = self._load_list(
            TASK_PERFORMANCE_KEY, TaskPerformanceRecord.from_dict
        )
        # The stored table is write-only; it is always rebuilt from history.
        self._optimal_times = compute_optimal_times(self._observations)

    # -- persistence -----------------------------------------------------

    def _read(self, key: str) -> Any:
        try:
            return self.store.get(key)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not read %s from history store: %s", key, exc)
            return None

    def _write(self, key: str, value: Any) -> None:
        try:
            self.store.set(key, value)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save %s to history store: %s", key, exc)

    def _load_list(self, key: str, parse: Callable[[dict], Any]) -> list:
        payload = self._read(key)
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning("Stored %s is not a list, starting with empty history", key)
            return []

        items = []
        for index, item in enumerate(payload, start=1):
            try:
                items.append(parse(item))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed %s entry %d: %s", key, index, exc)
        return items

    def _persist(self) -> None:
        self._write(MOOD_HISTORY_KEY, [obs.to_dict() for obs in self._observations])
        self._write(TASK_PERFORMANCE_KEY, [record.to_dict() for record in self._performance])
        self._write(OPTIMAL_TIMES_KEY, self._optimal_times)

    def _refresh(self) -> None:
        self._optimal_times = compute_optimal_times(self._observations)
        logger.debug(
            "Recomputed optimal times from %d observations, %d completions",
            len(self._observations),
            len(self._performance),
        )
        self._persist()

    # -- history ---------------------------------------------------------

    @property
    def observations(self) -> tuple[MoodEnergyObservation, ...]:
        return tuple(self._observations)

    @property
    def performance_records(self) -> tuple[TaskPerformanceRecord, ...]:
        return tuple(self._performance)

    @property
    def optimal_times(self) -> dict[str, list[dict]]:
        return {key: list(slots) for key, slots in self._optimal_times.items()}

    def record_observation(
        self, mood: str, energy: str, timestamp: datetime | None = None, note: str = ""
    ) -> MoodEnergyObservation:
        """Append a mood/energy check-in. Unknown labels are kept and weigh as neutral."""

        entry = MoodEnergyObservation(
            mood=mood,
            energy=energy,
            timestamp=timestamp if timestamp is not None else self._clock(),
            note=note,
        )
        with self._lock:
            self._observations.append(entry)
            self._refresh()
        return entry

    def record_observations(self, entries: Iterable[MoodEnergyObservation]) -> int:
        """Append a batch of check-ins and recompute once."""

        entries = list(entries)
        if not entries:
            return 0
        with self._lock:
            self._observations.extend(entries)
            self._refresh()
        return len(entries)

    def record_task_completion(
        self, task: dict, metrics: PerformanceMetrics | dict | None = None
    ) -> TaskPerformanceRecord:
        if not isinstance(metrics, PerformanceMetrics):
            metrics = PerformanceMetrics.from_mapping(metrics)

        now = self._clock()
        record = TaskPerformanceRecord(
            task_id=str(task.get("id", "")),
            task_type=resolve_task_type(task.get("type")),
            completion_time=now,
            time_of_day=time_of_day(now.hour),
            performance_score=metrics.performance_score,
            extra=dict(metrics.extra),
        )
        with self._lock:
            self._performance.append(record)
            self._refresh()
        return record

    # -- queries ---------------------------------------------------------

    def compute_optimal_times(self) -> dict[str, list[dict]]:
        with self._lock:
            self._refresh()
        return self.optimal_times

    def get_optimal_time_for_task(self, task_type: str, day_offset: int = 0) -> dict:
        """Suggest when to do a task of the given type.

        Picks the best cached slot still ahead of the current hour. When every
        slot has already passed today, the top slot is returned anyway, even
        though that time may be in the past.
        """

        now = self._clock()
        target = now + timedelta(days=day_offset)
        slots = self._optimal_times.get(task_type) or []
        task_info = TASK_TYPES.get(task_type)

        if not slots:
            bucket = (task_info or TASK_TYPES[resolve_task_type(task_type)]).time_of_day
            return {
                "time": target.replace(hour=default_hour(bucket), minute=0, second=0, microsecond=0),
                "confidence": 0.5,
                "reason": INSUFFICIENT_DATA_REASON,
            }

        slot = next((s for s in slots if s["hour"] > now.hour), slots[0])
        label = task_info.name.lower() if task_info else "this task"
        return {
            "time": target.replace(hour=int(slot["hour"]), minute=0, second=0, microsecond=0),
            "confidence": slot["score"],
            "reason": f"Based on your historical mood and energy patterns, this is an optimal time for {label}.",
        }

    def schedule_tasks(self, tasks: list[dict] | None) -> list[dict]:
        """Rank pending tasks, most pressing first.

        Each returned task is a copy of the input with ``final_score`` and
        ``suggested_time`` added. Ties keep their input order.
        """

        if not tasks:
            return []

        now = self._clock()
        scored = []
        for task in tasks:
            task_type = resolve_task_type(task.get("type"))
            scored.append(
                {
                    **task,
                    "final_score": score_task(task, now, self._performance),
                    "suggested_time": self.get_optimal_time_for_task(task_type),
                }
            )
        return sorted(scored, key=lambda item: item["final_score"], reverse=True)

    def find_optimal_productivity_window(self) -> dict:
        return find_optimal_productivity_window(self._observations)

    def get_current_recommendations(self) -> dict:
        summary = current_recommendations(self._observations, self._clock())
        summary["optimal_productivity_window"] = self.find_optimal_productivity_window()
        return summary

    def mood_stats(self) -> dict | None:
        return mood_stats(self._observations)

    def performance_summary(self) -> dict:
        return performance_summary(self._performance)
