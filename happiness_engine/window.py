"""Most productive contiguous block of hours."""

from __future__ import annotations

import math

from happiness_engine.catalog import format_hour
from happiness_engine.features import hourly_profile
from happiness_engine.schema import MoodEnergyObservation

MAX_WINDOW_HOURS = 4
DEFAULT_WINDOW = (9, 11)


def _window_score(profile, start: int, size: int) -> float:
    hours = [(start + offset) % 24 for offset in range(size)]
    scores = [profile.base_score(hour) for hour in hours if profile.count[hour] > 0]
    avg_score = sum(scores) / len(scores) if scores else 0.0
    return avg_score * (1 + size * 0.1)


def find_optimal_productivity_window(observations: list[MoodEnergyObservation]) -> dict:
    """Pick the 1-4 hour window with the best mood/energy average.

    Empty hours inside a window are left out of its average. Longer windows
    get a linear bonus. A candidate must strictly beat the current best, so on
    ties shorter windows and earlier starts win.
    """

    profile = hourly_profile(observations)

    best_start, best_end = DEFAULT_WINDOW
    best_score = 0.0
    for size in range(1, MAX_WINDOW_HOURS + 1):
        for start in range(24):
            score = _window_score(profile, start, size)
            if score > best_score:
                best_start, best_end, best_score = start, (start + size) % 24, score

    confidence = max(0, min(int(math.floor(best_score * 50 + 0.5)), 100))
    return {
        "start_hour": best_start,
        "end_hour": best_end,
        "display": f"{format_hour(best_start)} - {format_hour(best_end)}",
        "confidence": confidence,
    }
