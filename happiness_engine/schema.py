"""Core data schema for mood observations and task performance."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

logger = logging.getLogger("happiness_engine.schema")


def _coerce_score(score: Any) -> Optional[float]:
    if score is None:
        return None
    try:
        return float(score)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric performance_score %r", score)
        return None


@dataclass(frozen=True)
class MoodEnergyObservation:
    """A single recorded mood/energy check-in."""

    mood: str
    energy: str
    timestamp: datetime
    note: str = ""

    @property
    def hour(self) -> int:
        return self.timestamp.hour

    @property
    def weekday(self) -> int:
        return self.timestamp.weekday()

    def to_dict(self) -> dict:
        return {
            "mood": self.mood,
            "energy": self.energy,
            "timestamp": self.timestamp.isoformat(),
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, item: dict) -> "MoodEnergyObservation":
        return cls(
            mood=str(item["mood"]),
            energy=str(item["energy"]),
            timestamp=datetime.fromisoformat(item["timestamp"]),
            note=str(item.get("note") or ""),
        )


@dataclass
class PerformanceMetrics:
    """Metrics reported when a task is completed.

    ``extra`` carries any additional fields the caller reports; they are
    persisted alongside the record but not scored.
    """

    performance_score: Optional[float] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, metrics: dict | None) -> "PerformanceMetrics":
        if not metrics:
            return cls()
        extra = dict(metrics)
        score = extra.pop("performance_score", None)
        return cls(performance_score=_coerce_score(score), extra=extra)


@dataclass(frozen=True)
class TaskPerformanceRecord:
    """A completed task together with how well it went."""

    task_id: str
    task_type: str
    completion_time: datetime
    time_of_day: str
    performance_score: Optional[float] = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        return {
            **self.extra,
            "task_id": self.task_id,
            "task_type": self.task_type,
            "completion_time": self.completion_time.isoformat(),
            "time_of_day": self.time_of_day,
            "performance_score": self.performance_score,
        }

    @classmethod
    def from_dict(cls, item: dict) -> "TaskPerformanceRecord":
        known = {"task_id", "task_type", "completion_time", "time_of_day", "performance_score"}
        score = item.get("performance_score")
        return cls(
            task_id=str(item["task_id"]),
            task_type=str(item.get("task_type") or ""),
            completion_time=datetime.fromisoformat(item["completion_time"]),
            time_of_day=str(item.get("time_of_day") or ""),
            performance_score=_coerce_score(score),
            extra={key: value for key, value in item.items() if key not in known},
        )


@dataclass(frozen=True)
class UserPreferences:
    """Daily rhythm preferences supplied when the engine is built."""

    preferred_wake_time: int = 7
    preferred_bedtime: int = 23
    work_start: int = 9
    work_end: int = 17

    @classmethod
    def from_dict(cls, values: dict | None) -> "UserPreferences":
        values = values or {}
        defaults = cls()
        work_hours = values.get("work_hours") or {}
        return cls(
            preferred_wake_time=int(values.get("preferred_wake_time", defaults.preferred_wake_time)),
            preferred_bedtime=int(values.get("preferred_bedtime", defaults.preferred_bedtime)),
            work_start=int(work_hours.get("start", defaults.work_start)),
            work_end=int(work_hours.get("end", defaults.work_end)),
        )

    @property
    def work_hours(self) -> dict:
        return {"start": self.work_start, "end": self.work_end}
