"""Loaders that turn persisted JSON records into typed engine inputs.

Record shapes follow the app's storage layer, so both ``date`` and
``completedAt`` style keys are accepted. Bad records are skipped or
downgraded with a warning; only unreadable files raise.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping

from coach_engine.exceptions import HistoryLoadError
from coach_engine.models.exercise_log import ExerciseCatalogEntry, ExerciseLogEntry

logger = logging.getLogger(__name__)

_DATE_KEYS = ("date", "completedAt", "completed_at")
_NAME_KEYS = ("name", "workoutName", "workout_name")
_DURATION_KEYS = ("durationSeconds", "duration_seconds", "duration")
_SETS_KEYS = ("totalSets", "total_sets")


def _first(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 string (``Z`` suffix allowed) or pass through a datetime.

    Returns None for anything that is not a valid timestamp.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _as_int(value: Any, default: int | None) -> int | None:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric value %r", value)
        return default


def parse_log_entry(record: Mapping[str, Any]) -> ExerciseLogEntry | None:
    """Build an ExerciseLogEntry from a stored record.

    Returns None when the record has no exercise name. An unparseable date
    keeps the entry but marks it undated.
    """
    name = _first(record, _NAME_KEYS)
    if not isinstance(name, str) or not name:
        logger.warning("Skipping log record without a name: %r", record)
        return None

    raw_date = _first(record, _DATE_KEYS)
    timestamp = parse_timestamp(raw_date)
    if timestamp is None:
        logger.warning("Log record %r has malformed date %r; treating as undated", name, raw_date)

    duration = _as_int(_first(record, _DURATION_KEYS), 0)
    total_sets = _as_int(_first(record, _SETS_KEYS), None)
    return ExerciseLogEntry(
        date=timestamp,
        name=name,
        duration_seconds=duration or 0,
        total_sets=total_sets,
    )


def parse_catalog_entry(record: Mapping[str, Any]) -> ExerciseCatalogEntry | None:
    """Build an ExerciseCatalogEntry; None when name is missing."""
    name = record.get("name")
    if not isinstance(name, str) or not name:
        logger.warning("Skipping catalog record without a name: %r", record)
        return None
    return ExerciseCatalogEntry(
        name=name,
        primary_muscle=str(_first(record, ("primaryMuscle", "primary_muscle")) or ""),
        equipment=str(record.get("equipment") or ""),
        difficulty=str(record.get("difficulty") or ""),
        movement_pattern=_first(record, ("movementPattern", "movement_pattern")),
    )


def parse_personal_records(raw: Mapping[str, Any]) -> dict[str, float]:
    """Exercise name -> best weight, dropping non-numeric values."""
    records: dict[str, float] = {}
    for name, weight in raw.items():
        try:
            records[str(name)] = float(weight)
        except (TypeError, ValueError):
            logger.warning("Skipping personal record %r with non-numeric weight %r", name, weight)
    return records


def _read_json(path: Path | str, expected: type) -> Any:
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise HistoryLoadError(f"File not found: {path}", path=str(path)) from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise HistoryLoadError(f"Could not read {path}: {exc}", path=str(path)) from exc

    if not isinstance(data, expected):
        raise HistoryLoadError(
            f"Expected a JSON {expected.__name__} in {path}, got {type(data).__name__}",
            path=str(path),
        )
    return data


def load_exercise_log(path: Path | str) -> list[ExerciseLogEntry]:
    """Load the exercise log from a JSON array of records."""
    entries = [parse_log_entry(r) for r in _read_json(path, list) if isinstance(r, dict)]
    return [e for e in entries if e is not None]


def load_exercise_catalog(path: Path | str) -> list[ExerciseCatalogEntry]:
    """Load the exercise catalog from a JSON array of records."""
    entries = [parse_catalog_entry(r) for r in _read_json(path, list) if isinstance(r, dict)]
    return [e for e in entries if e is not None]


def load_personal_records(path: Path | str) -> dict[str, float]:
    """Load the personal-record map from a JSON object."""
    return parse_personal_records(_read_json(path, dict))
