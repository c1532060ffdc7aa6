"""CSV adapter for mood/energy check-in logs."""

from __future__ import annotations

import csv
from datetime import datetime

from happiness_engine.schema import MoodEnergyObservation

_REQUIRED_FIELDS = ("mood", "energy", "timestamp")


def _parse_row(row: dict, row_number: int) -> MoodEnergyObservation:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        timestamp = datetime.fromisoformat(row["timestamp"].strip())
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed timestamp") from exc

    return MoodEnergyObservation(
        mood=row["mood"].strip().lower(),
        energy=row["energy"].strip().lower(),
        timestamp=timestamp,
        note=(row.get("note") or "").strip(),
    )


def parse(file_path: str) -> list[MoodEnergyObservation]:
    """Parse a CSV file into mood/energy observations."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        return [_parse_row(row, row_number) for row_number, row in enumerate(reader, start=2)]
