"""JSON adapter for mood/energy check-in logs."""

from __future__ import annotations

import json
from datetime import datetime

from happiness_engine.schema import MoodEnergyObservation

_REQUIRED_FIELDS = ("mood", "energy", "timestamp")


def _parse_item(item: dict, index: int) -> MoodEnergyObservation:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        timestamp = datetime.fromisoformat(str(item["timestamp"]))
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed timestamp") from exc

    return MoodEnergyObservation(
        mood=str(item["mood"]).strip().lower(),
        energy=str(item["energy"]).strip().lower(),
        timestamp=timestamp,
        note=str(item.get("note") or "").strip(),
    )


def parse(file_path: str) -> list[MoodEnergyObservation]:
    """Parse a JSON file holding a list of check-ins."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
