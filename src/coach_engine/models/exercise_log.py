"""Input records — exercise log entries, catalog entries and user stats.

These are owned by the persistence layer; the engine only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ExerciseLogEntry:
    """One completed exercise session from the user's history.

    ``date`` may be ``None`` when the stored timestamp could not be parsed;
    such entries are left out of every date-based metric.
    """

    date: datetime | date | None
    name: str
    duration_seconds: int = 0
    total_sets: int | None = None


@dataclass(frozen=True)
class ExerciseCatalogEntry:
    """Static exercise reference data used for muscle lookup."""

    name: str
    primary_muscle: str
    equipment: str = ""
    difficulty: str = ""
    movement_pattern: str | None = None


@dataclass(frozen=True)
class UserStats:
    """Aggregate user statistics maintained by the achievement subsystem.

    Accepted by the engine for API compatibility; no rule reads it.
    """

    total_workouts: int = 0
    this_week_workouts: int = 0
    total_prs: int = 0
    current_streak: int = 0
    max_streak: int = 0
    unique_exercises: int = 0
