"""Import a check-in log and print scheduling recommendations as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from happiness_engine.adapters import csv_adapter, json_adapter
from happiness_engine.engine import HappinessEngine
from happiness_engine.storage import InMemoryStore, JsonFileStore


def _load_observations(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _load_tasks(path: Path) -> list[dict]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError("Tasks file must hold a list of objects")
    return payload


def main() -> None:
    parser = argparse.ArgumentParser(description="Recommend when to do which kind of work")
    parser.add_argument("--data", help="Path to CSV/JSON check-in log to import")
    parser.add_argument("--store", help="JSON file that keeps history between runs")
    parser.add_argument("--tasks", help="JSON list of pending tasks to rank")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    store = JsonFileStore(args.store) if args.store else InMemoryStore()
    engine = HappinessEngine(store=store)
    if args.data:
        engine.record_observations(_load_observations(Path(args.data)))

    report = {
        "observations": len(engine.observations),
        "optimal_times": engine.optimal_times,
        "recommendations": engine.get_current_recommendations(),
        "mood_stats": engine.mood_stats(),
    }
    if args.tasks:
        report["ranked_tasks"] = engine.schedule_tasks(_load_tasks(Path(args.tasks)))

    print(json.dumps(report, indent=2, default=str))


if __name__ == "__main__":
    main()
