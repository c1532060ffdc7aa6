"""Pending task scoring: priority, time fit, deadline urgency and track record."""

from __future__ import annotations

import logging
from datetime import datetime

from happiness_engine.catalog import TASK_TYPES, resolve_task_type, time_of_day
from happiness_engine.schema import TaskPerformanceRecord

logger = logging.getLogger("happiness_engine.scoring")

RECENT_PERFORMANCE_WINDOW = 5
NEUTRAL_PERFORMANCE = 0.5

_PRIORITY_SCORES = {"high": 1.5, "medium": 1.2}


def priority_score(priority: str | None) -> float:
    return _PRIORITY_SCORES.get(priority, 1.0)


def time_match_score(task_type: str, now: datetime) -> float:
    return 1.2 if TASK_TYPES[resolve_task_type(task_type)].time_of_day == time_of_day(now.hour) else 0.9


def parse_deadline(deadline) -> datetime | None:
    if deadline is None or deadline == "":
        return None
    if isinstance(deadline, datetime):
        return deadline
    try:
        return datetime.fromisoformat(str(deadline))
    except ValueError:
        logger.warning("Ignoring unparseable deadline %r", deadline)
        return None


def deadline_score(deadline, now: datetime) -> float:
    """Return an urgency score that grows as the deadline approaches."""

    deadline_at = parse_deadline(deadline)
    if deadline_at is None:
        return 0.5

    hours_left = (deadline_at.timestamp() - now.timestamp()) / 3600.0
    if hours_left <= 0:
        return 2.0
    if hours_left <= 24:
        return 1.8
    if hours_left <= 48:
        return 1.5
    if hours_left <= 168:
        return 1.2
    return 0.8


def historical_performance_score(task_type: str, records: list[TaskPerformanceRecord]) -> float:
    """Average performance over the most recent completions of the same type."""

    resolved = resolve_task_type(task_type)
    similar = [record for record in records if resolve_task_type(record.task_type) == resolved]
    if not similar:
        return NEUTRAL_PERFORMANCE

    recent = sorted(similar, key=lambda r: r.completion_time.timestamp(), reverse=True)[:RECENT_PERFORMANCE_WINDOW]
    scores = [NEUTRAL_PERFORMANCE if r.performance_score is None else r.performance_score for r in recent]
    return sum(scores) / len(scores)


def score_task(task: dict, now: datetime, records: list[TaskPerformanceRecord], return_components: bool = False):
    """Combine the four sub-scores into the final ranking score."""

    task_type = resolve_task_type(task.get("type"))
    priority = priority_score(task.get("priority"))
    time_match = time_match_score(task_type, now)
    urgency = deadline_score(task.get("deadline"), now)
    historical = historical_performance_score(task_type, records)

    score = priority * 0.4 + time_match * 0.2 + urgency * 0.3 + historical * 0.1

    if return_components:
        return {
            "score": score,
            "priority": priority,
            "time_match": time_match,
            "deadline": urgency,
            "historical": historical,
        }

    return score
