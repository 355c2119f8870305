"""Training analysis — derived snapshot of a user's exercise history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from coach_engine.models.enums import (
    DEFAULT_DAYS_SINCE_LAST_PR,
    DEFAULT_WORKOUT_TIME,
    NO_WORKOUT_SENTINEL_DAYS,
    ProgressionRate,
    VolumeTrend,
)


@dataclass(frozen=True)
class TrainingAnalysis:
    """Immutable snapshot consumed by every coaching rule.

    Produced by ``analyze_training()``. A default-constructed instance is
    the analysis of an empty log, which keeps rule tests short.
    """

    # Volume
    total_sets_last_week: int = 0
    total_sets_last_month: int = 0
    avg_sets_per_workout: float = 0.0
    volume_trend: VolumeTrend = VolumeTrend.STABLE

    # Frequency
    workouts_last_week: int = 0
    workouts_last_month: int = 0
    avg_workouts_per_week: float = 0.0
    total_workouts: int = 0

    # Muscle balance
    muscle_group_distribution: dict[str, int] = field(default_factory=dict)
    undertrained_muscles: tuple[str, ...] = field(default_factory=tuple)
    overtrained_muscles: tuple[str, ...] = field(default_factory=tuple)

    # Recovery
    days_since_last_workout: int = NO_WORKOUT_SENTINEL_DAYS
    consecutive_workout_days: int = 0
    rest_days_last_week: int = 7

    # Progression
    pr_count: int = 0
    days_since_last_pr: int = DEFAULT_DAYS_SINCE_LAST_PR
    progression_rate: ProgressionRate = ProgressionRate.NORMAL

    # Variety
    unique_exercises_last_month: int = 0
    most_frequent_exercises: tuple[str, ...] = field(default_factory=tuple)
    least_recent_exercises: tuple[str, ...] = field(default_factory=tuple)

    # Patterns
    preferred_workout_days: tuple[str, ...] = field(default_factory=tuple)
    preferred_workout_time: str = DEFAULT_WORKOUT_TIME
    avg_workout_duration: float = 0.0

    # Catalog context
    exercises_by_muscle: dict[str, tuple[str, ...]] = field(default_factory=dict)
    unexplored_equipment: tuple[str, ...] = field(default_factory=tuple)

    reference_time: datetime | None = None

    def average_muscle_count(self) -> float:
        """Mean occurrences per trained muscle group (0 when none)."""
        counts = self.muscle_group_distribution.values()
        return sum(counts) / max(len(counts), 1)

    def exercises_for_muscle(self, muscle: str) -> tuple[str, ...]:
        """Catalog exercises whose primary muscle is *muscle*."""
        return self.exercises_by_muscle.get(muscle, ())
