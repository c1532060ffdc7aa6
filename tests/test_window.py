from datetime import datetime

from happiness_engine.schema import MoodEnergyObservation
from happiness_engine.window import find_optimal_productivity_window


def obs(mood, energy, when):
    return MoodEnergyObservation(mood, energy, datetime.fromisoformat(when))


def test_empty_history_returns_default_window():
    assert find_optimal_productivity_window([]) == {
        "start_hour": 9,
        "end_hour": 11,
        "display": "9 AM - 11 AM",
        "confidence": 0,
    }


def test_ties_prefer_earliest_start():
    window = find_optimal_productivity_window([obs("excited", "high", "2025-01-01T09:00:00")])
    # Every 4-hour window holding 9 AM scores the same; the first found wins.
    assert window["start_hour"] == 6
    assert window["end_hour"] == 10
    assert window["display"] == "6 AM - 10 AM"
    assert window["confidence"] == 84


def test_window_end_wraps_past_midnight():
    window = find_optimal_productivity_window([obs("excited", "high", "2025-01-01T23:30:00")])
    assert window["start_hour"] == 20
    assert window["end_hour"] == 0
    assert window["display"] == "8 PM - 12 AM"


def test_empty_hours_do_not_drag_average_down():
    history = [
        obs("excited", "high", "2025-01-01T09:00:00"),
        obs("stressed", "low", "2025-01-01T15:00:00"),
    ]
    window = find_optimal_productivity_window(history)
    assert window["start_hour"] <= 9 < window["start_hour"] + 4
    assert 0 <= window["confidence"] <= 100
