from happiness_engine.catalog import (
    energy_level,
    energy_weight,
    format_hour,
    mood_from_score,
    mood_weight,
    resolve_task_type,
    time_of_day,
)


def test_unknown_labels_weigh_neutral():
    assert mood_weight("ecstatic") == 1.0
    assert energy_weight("turbo") == 1.0
    assert mood_weight("stressed") == 0.6
    assert energy_weight("low") == 0.7


def test_mood_from_score_boundaries():
    assert mood_from_score(1.1) == "excited"
    assert mood_from_score(1.0) == "happy"
    assert mood_from_score(0.95) == "neutral"
    assert mood_from_score(0.9) == "neutral"
    assert mood_from_score(0.7) == "tired"
    assert mood_from_score(0.69) == "stressed"
    assert mood_from_score(-3) == "stressed"
    assert mood_from_score(42) == "excited"


def test_energy_level_thresholds():
    assert energy_level(1.2) == "high"
    assert energy_level(1.1) == "medium"
    assert energy_level(1.0) == "medium"
    assert energy_level(0.9) == "low"


def test_time_of_day_buckets():
    assert [time_of_day(h) for h in (4, 5, 11, 12, 16, 17, 21, 22)] == [
        "night",
        "morning",
        "morning",
        "afternoon",
        "afternoon",
        "evening",
        "evening",
        "night",
    ]


def test_format_hour():
    assert format_hour(0) == "12 AM"
    assert format_hour(9) == "9 AM"
    assert format_hour(12) == "12 PM"
    assert format_hour(23) == "11 PM"


def test_resolve_task_type_defaults_to_routine():
    assert resolve_task_type("CREATIVE") == "CREATIVE"
    assert resolve_task_type(None) == "ROUTINE"
    assert resolve_task_type("MYSTERY") == "ROUTINE"
