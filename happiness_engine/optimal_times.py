"""Best hours of the day per task type, learned from mood history."""

from __future__ import annotations

from happiness_engine.catalog import TASK_TYPES, TaskType, format_hour, mood_from_score, time_of_day
from happiness_engine.features import HourlyProfile, hourly_profile
from happiness_engine.schema import MoodEnergyObservation

TOP_SLOTS = 3


def _energy_match(task_info: TaskType, avg_energy: float) -> float:
    if task_info.ideal_energy == "high":
        return avg_energy
    if task_info.ideal_energy == "medium":
        return 1 - abs(0.5 - avg_energy) * 2
    return 1 - avg_energy


def hour_fit(task_info: TaskType, profile: HourlyProfile, hour: int) -> float:
    """Score how well an hour with recorded data suits a task type."""

    score = profile.base_score(hour)
    if task_info.time_of_day == time_of_day(hour):
        score *= 1.2

    energy_match = _energy_match(task_info, profile.avg_energy(hour))
    mood_match = 1.2 if mood_from_score(profile.avg_mood(hour)) in task_info.ideal_moods else 1.0

    return score * 0.6 + energy_match * 0.2 + mood_match * 0.2


def compute_optimal_times(observations: list[MoodEnergyObservation]) -> dict[str, list[dict]]:
    """Return the top three hours per task type, best first."""

    profile = hourly_profile(observations)
    hours = profile.hours_with_data()

    table: dict[str, list[dict]] = {}
    for key, task_info in TASK_TYPES.items():
        ranked = sorted(
            ((hour, hour_fit(task_info, profile, hour)) for hour in hours),
            key=lambda item: item[1],
            reverse=True,
        )
        table[key] = [
            {"hour": hour, "time_label": format_hour(hour), "score": round(score, 2)}
            for hour, score in ranked[:TOP_SLOTS]
        ]
    return table
