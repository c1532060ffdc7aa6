"""Static weight tables, task type catalog and hour bucketing helpers."""

from __future__ import annotations

from dataclasses import dataclass

MOOD_WEIGHTS = {
    "excited": 1.2,
    "happy": 1.1,
    "neutral": 1.0,
    "tired": 0.8,
    "stressed": 0.6,
}

ENERGY_WEIGHTS = {
    "high": 1.2,
    "medium": 1.0,
    "low": 0.7,
}

MOODS = tuple(MOOD_WEIGHTS)
ENERGY_LEVELS = tuple(ENERGY_WEIGHTS)

DEFAULT_TASK_TYPE = "ROUTINE"


@dataclass(frozen=True)
class TaskType:
    """Ideal conditions for a category of work."""

    name: str
    ideal_moods: frozenset
    ideal_energy: str
    time_of_day: str
    duration: int


TASK_TYPES: dict[str, TaskType] = {
    "CREATIVE": TaskType("Creative Work", frozenset({"excited", "happy"}), "high", "morning", 90),
    "ANALYTICAL": TaskType("Analytical Work", frozenset({"neutral", "happy"}), "high", "morning", 60),
    "ROUTINE": TaskType("Routine Tasks", frozenset({"neutral", "tired"}), "medium", "afternoon", 30),
    "LEARNING": TaskType("Learning New Skills", frozenset({"excited", "happy"}), "medium", "morning", 45),
    "PLANNING": TaskType("Planning & Strategy", frozenset({"neutral", "happy"}), "medium", "afternoon", 60),
    "PHYSICAL": TaskType("Physical Activity", frozenset({"excited", "happy", "stressed"}), "high", "afternoon", 45),
    "SOCIAL": TaskType("Social & Communication", frozenset({"happy", "excited"}), "medium", "afternoon", 60),
    "RELAXATION": TaskType("Relaxation & Self-care", frozenset({"tired", "stressed"}), "low", "evening", 30),
}

# Fallback hour per ideal bucket when there is no history to learn from.
_DEFAULT_HOURS = {"morning": 10, "afternoon": 14, "evening": 19}


def mood_weight(mood: str) -> float:
    return MOOD_WEIGHTS.get(mood, 1.0)


def energy_weight(energy: str) -> float:
    return ENERGY_WEIGHTS.get(energy, 1.0)


def resolve_task_type(task_type: str | None) -> str:
    """Map a missing or unknown task type onto the routine category."""

    if task_type and task_type in TASK_TYPES:
        return task_type
    return DEFAULT_TASK_TYPE


def time_of_day(hour: int) -> str:
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 22:
        return "evening"
    return "night"


def default_hour(bucket: str) -> int:
    return _DEFAULT_HOURS.get(bucket, 10)


def mood_from_score(score: float) -> str:
    """Translate an averaged mood weight back into a mood label."""

    if score >= 1.1:
        return "excited"
    if score >= 1.0:
        return "happy"
    if score >= 0.9:
        return "neutral"
    if score >= 0.7:
        return "tired"
    return "stressed"


def energy_level(score: float) -> str:
    if score > 1.1:
        return "high"
    if score > 0.9:
        return "medium"
    return "low"


def format_hour(hour: int) -> str:
    """Return a 12-hour clock label such as ``9 AM`` or ``12 PM``."""

    hour = int(hour) % 24
    period = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12} {period}"
