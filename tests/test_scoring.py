from datetime import datetime, timedelta

import pytest

from happiness_engine.schema import TaskPerformanceRecord
from happiness_engine.scoring import (
    deadline_score,
    historical_performance_score,
    priority_score,
    score_task,
    time_match_score,
)

NOW = datetime.fromisoformat("2025-06-02T10:00:00")


def record(task_type, hours_ago, score):
    return TaskPerformanceRecord(
        task_id=f"{task_type}-{hours_ago}",
        task_type=task_type,
        completion_time=NOW - timedelta(hours=hours_ago),
        time_of_day="morning",
        performance_score=score,
    )


def test_priority_scores():
    assert priority_score("high") == 1.5
    assert priority_score("medium") == 1.2
    assert priority_score("low") == 1.0
    assert priority_score(None) == 1.0


def test_time_match_uses_current_bucket():
    assert time_match_score("CREATIVE", NOW) == 1.2
    assert time_match_score("ROUTINE", NOW) == 0.9


def test_deadline_buckets():
    assert deadline_score(None, NOW) == 0.5
    assert deadline_score(NOW - timedelta(hours=1), NOW) == 2.0
    assert deadline_score(NOW, NOW) == 2.0
    assert deadline_score(NOW + timedelta(hours=12), NOW) == 1.8
    assert deadline_score(NOW + timedelta(hours=36), NOW) == 1.5
    assert deadline_score(NOW + timedelta(hours=100), NOW) == 1.2
    assert deadline_score(NOW + timedelta(hours=500), NOW) == 0.8
    assert deadline_score("2025-06-02T20:00:00", NOW) == 1.8


def test_historical_performance_uses_five_most_recent():
    records = [record("CREATIVE", 100, 0.0)] + [record("CREATIVE", h, 1.0) for h in range(1, 6)]
    assert historical_performance_score("CREATIVE", records) == pytest.approx(1.0)


def test_historical_performance_defaults():
    assert historical_performance_score("CREATIVE", []) == 0.5
    records = [record("ANALYTICAL", 1, 0.9), record("CREATIVE", 2, None), record("CREATIVE", 3, 0.9)]
    assert historical_performance_score("CREATIVE", records) == pytest.approx(0.7)


def test_score_task_combines_weights():
    task = {"id": "t1", "type": "CREATIVE", "priority": "high"}
    assert score_task(task, NOW, []) == pytest.approx(1.04)

    components = score_task({"id": "t2", "type": "MYSTERY"}, NOW, [], return_components=True)
    assert components["time_match"] == 0.9
    assert components["score"] == pytest.approx(0.78)


def test_unparseable_deadline_counts_as_missing():
    assert deadline_score("next tuesday", NOW) == 0.5
