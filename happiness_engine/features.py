"""Hour-of-day mood and energy aggregation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from happiness_engine.catalog import energy_weight, mood_weight
from happiness_engine.schema import MoodEnergyObservation


@dataclass
class HourlyProfile:
    """Per-hour sums and counts pooled over every day in history."""

    mood_sum: np.ndarray
    energy_sum: np.ndarray
    count: np.ndarray

    def hours_with_data(self) -> list[int]:
        return [int(hour) for hour in np.flatnonzero(self.count)]

    def avg_mood(self, hour: int) -> float:
        return float(self.mood_sum[hour] / self.count[hour]) if self.count[hour] else 0.0

    def avg_energy(self, hour: int) -> float:
        return float(self.energy_sum[hour] / self.count[hour]) if self.count[hour] else 0.0

    def base_score(self, hour: int) -> float:
        return (self.avg_mood(hour) + self.avg_energy(hour)) / 2


def hourly_profile(observations: list[MoodEnergyObservation]) -> HourlyProfile:
    """Accumulate mood/energy weights into 24 hour-of-day buckets."""

    hours = np.asarray([obs.hour for obs in observations], dtype=int)
    moods = np.asarray([mood_weight(obs.mood) for obs in observations], dtype=float)
    energies = np.asarray([energy_weight(obs.energy) for obs in observations], dtype=float)

    return HourlyProfile(
        mood_sum=np.bincount(hours, weights=moods, minlength=24),
        energy_sum=np.bincount(hours, weights=energies, minlength=24),
        count=np.bincount(hours, minlength=24),
    )
