"""Shared test fixtures: reference clock, exercise catalog, log builders."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import pytest

from coach_engine.models.exercise_log import ExerciseCatalogEntry, ExerciseLogEntry

# Wednesday evening
REFERENCE_NOW = datetime(2026, 3, 18, 18, 0)


@pytest.fixture
def now() -> datetime:
    return REFERENCE_NOW


@pytest.fixture
def catalog() -> list[ExerciseCatalogEntry]:
    """Small gym catalog: chest, back, legs (6 exercises) and shoulders."""
    return [
        ExerciseCatalogEntry("Bench Press", "Chest", equipment="Barbell"),
        ExerciseCatalogEntry("Incline Dumbbell Press", "Chest", equipment="Dumbbells"),
        ExerciseCatalogEntry("Push-Up", "Chest", equipment="Bodyweight"),
        ExerciseCatalogEntry("Cable Fly", "Chest", equipment="Cables"),
        ExerciseCatalogEntry("Barbell Row", "Back", equipment="Barbell"),
        ExerciseCatalogEntry("Pull-Up", "Back", equipment="Bodyweight"),
        ExerciseCatalogEntry("Lat Pulldown", "Back", equipment="Cables"),
        ExerciseCatalogEntry("Back Squat", "Legs", equipment="Barbell"),
        ExerciseCatalogEntry("Romanian Deadlift", "Legs", equipment="Barbell"),
        ExerciseCatalogEntry("Leg Press", "Legs", equipment="Machine"),
        ExerciseCatalogEntry("Walking Lunge", "Legs", equipment="Dumbbells"),
        ExerciseCatalogEntry("Leg Extension", "Legs", equipment="Machine"),
        ExerciseCatalogEntry("Calf Raise", "Legs", equipment="Machine"),
        ExerciseCatalogEntry("Overhead Press", "Shoulders", equipment="Barbell"),
    ]


@pytest.fixture
def entry_factory(now: datetime) -> Callable[..., ExerciseLogEntry]:
    """Factory fixture for log entries relative to the reference clock.

    Usage:
        entry = entry_factory(3, "Back Squat", total_sets=5)
    """

    def factory(
        days_ago: float,
        name: str = "Bench Press",
        total_sets: int | None = 4,
        duration_seconds: int = 3600,
    ) -> ExerciseLogEntry:
        return ExerciseLogEntry(
            date=now - timedelta(days=days_ago),
            name=name,
            duration_seconds=duration_seconds,
            total_sets=total_sets,
        )

    return factory


@pytest.fixture
def six_day_streak(
    entry_factory: Callable[..., ExerciseLogEntry],
) -> list[ExerciseLogEntry]:
    """One workout on each of the last six calendar days, ending today."""
    names = ["Bench Press", "Back Squat", "Barbell Row", "Overhead Press", "Pull-Up", "Leg Press"]
    return [entry_factory(days_ago, name) for days_ago, name in enumerate(names)]


@pytest.fixture
def single_exercise_month(
    entry_factory: Callable[..., ExerciseLogEntry],
) -> list[ExerciseLogEntry]:
    """20 Bench Press sessions over the last 20 days."""
    return [entry_factory(days_ago, "Bench Press") for days_ago in range(20)]


@pytest.fixture
def stalled_high_volume(
    entry_factory: Callable[..., ExerciseLogEntry],
) -> list[ExerciseLogEntry]:
    """20 workouts last month with a current 4-day streak (days 0-3, gap on day 4)."""
    streak = [entry_factory(d, "Back Squat") for d in range(4)]
    earlier = [entry_factory(d, "Bench Press") for d in range(5, 21)]
    return streak + earlier
