"""Recommendations for what to work on right now."""

from __future__ import annotations

from datetime import datetime

from happiness_engine.catalog import TASK_TYPES, energy_level, energy_weight, mood_from_score, mood_weight, time_of_day
from happiness_engine.schema import MoodEnergyObservation

RECENT_OBSERVATIONS = 3
TOP_TASK_TYPES = 3


def current_state(observations: list[MoodEnergyObservation]) -> tuple[float, float]:
    """Average mood and energy weights over the latest check-ins."""

    recent = sorted(observations, key=lambda obs: obs.timestamp.timestamp(), reverse=True)[:RECENT_OBSERVATIONS]
    if not recent:
        return 1.0, 1.0
    avg_mood = sum(mood_weight(obs.mood) for obs in recent) / len(recent)
    avg_energy = sum(energy_weight(obs.energy) for obs in recent) / len(recent)
    return avg_mood, avg_energy


def rank_task_types(mood_label: str, energy_label: str, bucket: str) -> list[dict]:
    ranked = []
    for key, info in TASK_TYPES.items():
        score = 1.0
        if info.time_of_day == bucket:
            score *= 1.2
        if mood_label in info.ideal_moods:
            score *= 1.3
        if info.ideal_energy == energy_label:
            score *= 1.2
        ranked.append({"type": key, "name": info.name, "score": score, "ideal_duration": info.duration})

    return sorted(ranked, key=lambda item: item["score"], reverse=True)[:TOP_TASK_TYPES]


def recommendation_message(mood_label: str, energy_label: str, top_tasks: list[dict]) -> str:
    first = top_tasks[0]["name"].lower()
    second = top_tasks[1]["name"].lower()

    if mood_label == "stressed" and energy_label == "low":
        return (
            "You seem to be feeling stressed with low energy. "
            "Consider taking a short break or doing a relaxing activity to recharge."
        )
    if mood_label == "excited" and energy_label == "high":
        return "You're feeling great with high energy! This is a perfect time to tackle challenging or creative tasks."
    if energy_label == "high":
        return f"With your current energy level, you'd be great at {first} or {second} right now."
    if energy_label == "low":
        return f"You might want to focus on lighter tasks like {first} or take a short break to recharge."
    return f"Based on your current state, consider working on {first} or {second}."


def current_recommendations(observations: list[MoodEnergyObservation], now: datetime) -> dict:
    """Summarize the current state and the task types that suit it best."""

    avg_mood, avg_energy = current_state(observations)
    mood_label = mood_from_score(avg_mood)
    energy_label = energy_level(avg_energy)
    bucket = time_of_day(now.hour)

    top_tasks = rank_task_types(mood_label, energy_label, bucket)
    return {
        "current_state": {"mood": mood_label, "energy": energy_label, "time_of_day": bucket},
        "recommended_tasks": top_tasks,
        "recommendation": recommendation_message(mood_label, energy_label, top_tasks),
    }
