"""Mood and task performance summary metrics."""

from __future__ import annotations

from collections import Counter, defaultdict

from happiness_engine.catalog import MOODS, resolve_task_type
from happiness_engine.schema import MoodEnergyObservation, TaskPerformanceRecord
from happiness_engine.scoring import NEUTRAL_PERFORMANCE


def mood_stats(observations: list[MoodEnergyObservation]) -> dict | None:
    """Compute the mood distribution over all check-ins."""

    if not observations:
        return None

    counts = Counter(obs.mood for obs in observations)
    total = len(observations)
    # On a tie the mood whose first check-in came later wins.
    most_common = None
    for mood, count in counts.items():
        if most_common is None or count >= counts[most_common]:
            most_common = mood

    return {
        "total_entries": total,
        "most_common_mood": most_common,
        "moods": [
            {
                "mood": mood,
                "count": counts.get(mood, 0),
                "percentage": int(counts.get(mood, 0) * 100 / total + 0.5),
            }
            for mood in MOODS
        ],
    }


def performance_summary(records: list[TaskPerformanceRecord]) -> dict:
    """Count and mean performance score per task type."""

    by_type = defaultdict(list)
    for record in records:
        score = NEUTRAL_PERFORMANCE if record.performance_score is None else record.performance_score
        by_type[resolve_task_type(record.task_type)].append(score)

    return {
        task_type: {"count": len(scores), "avg_performance": sum(scores) / len(scores)}
        for task_type, scores in by_type.items()
    }
