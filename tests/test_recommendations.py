from datetime import datetime

from happiness_engine.recommendations import current_recommendations, current_state
from happiness_engine.schema import MoodEnergyObservation

MORNING = datetime.fromisoformat("2025-06-02T10:00:00")


def obs(mood, energy, when):
    return MoodEnergyObservation(mood, energy, datetime.fromisoformat(when))


def test_no_history_defaults_to_neutral():
    assert current_state([]) == (1.0, 1.0)

    result = current_recommendations([], MORNING)
    assert result["current_state"] == {"mood": "happy", "energy": "medium", "time_of_day": "morning"}
    assert [task["type"] for task in result["recommended_tasks"]] == ["LEARNING", "CREATIVE", "ANALYTICAL"]
    assert result["recommendation"] == (
        "Based on your current state, consider working on learning new skills or creative work."
    )


def test_only_latest_three_observations_count():
    history = [
        obs("stressed", "low", "2025-06-01T18:00:00"),
        obs("stressed", "low", "2025-06-01T20:00:00"),
        obs("stressed", "low", "2025-06-02T08:00:00"),
        obs("excited", "high", "2025-05-20T09:00:00"),
    ]
    result = current_recommendations(history, MORNING)
    assert result["current_state"]["mood"] == "stressed"
    assert result["current_state"]["energy"] == "low"
    assert result["recommendation"].startswith("You seem to be feeling stressed with low energy.")


def test_excited_and_high_energy_message():
    history = [obs("excited", "high", f"2025-06-0{day}T09:00:00") for day in (1, 2)]
    result = current_recommendations(history, MORNING)
    assert result["recommendation"].startswith("You're feeling great with high energy!")


def test_high_energy_names_top_task_types():
    history = [obs("neutral", "high", "2025-06-02T09:00:00")]
    result = current_recommendations(history, MORNING)
    assert result["recommendation"] == (
        "With your current energy level, you'd be great at creative work or analytical work right now."
    )
    assert result["recommended_tasks"][0]["ideal_duration"] == 90


def test_low_energy_suggests_lighter_work():
    history = [obs("neutral", "low", "2025-06-02T09:00:00")]
    result = current_recommendations(history, MORNING)
    assert result["recommendation"].startswith("You might want to focus on lighter tasks like")
