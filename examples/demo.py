"""Demo script for happiness-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from happiness_engine.adapters.csv_adapter import parse
from happiness_engine.engine import HappinessEngine


def main() -> None:
    engine = HappinessEngine()
    engine.record_observations(parse("examples/sample_observations.csv"))

    tasks = [
        {"id": "write-post", "type": "CREATIVE", "priority": "high"},
        {"id": "inbox", "type": "ROUTINE", "priority": "low"},
        {"id": "quarterly-plan", "type": "PLANNING", "priority": "medium"},
    ]
    print("Optimal times:", engine.optimal_times["CREATIVE"])
    print("Window:", engine.find_optimal_productivity_window())
    print("Now:", engine.get_current_recommendations()["recommendation"])
    for task in engine.schedule_tasks(tasks):
        print(task["id"], round(task["final_score"], 3), task["suggested_time"]["time"])


if __name__ == "__main__":
    main()
