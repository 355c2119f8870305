"""Training analyzer — reduces a raw exercise log to a TrainingAnalysis.

The analyzer is a pure function of its inputs: the log, the personal-record
map, the exercise catalog and a reference "now". Empty or undated input
produces the all-zero / sentinel analysis instead of raising.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from coach_engine.math.aggregation import (
    build_log_frame,
    between,
    classify_muscle_balance,
    classify_progression_rate,
    classify_volume_trend,
    count_consecutive_days,
    count_occurrences,
    days_between,
    naive_reference,
    normalize_timestamp,
    rank_by_count,
    window,
)
from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    DEFAULT_DAYS_SINCE_LAST_PR,
    DEFAULT_WORKOUT_TIME,
    MAX_EXERCISES_PER_MUSCLE,
    MAX_LEAST_RECENT_EXERCISES,
    MONTH_WINDOW_DAYS,
    NO_WORKOUT_SENTINEL_DAYS,
    TOP_EXERCISE_COUNT,
    WEEK_WINDOW_DAYS,
    WEEKS_PER_MONTH,
)
from coach_engine.models.exercise_log import ExerciseCatalogEntry, ExerciseLogEntry

logger = logging.getLogger(__name__)


def analyze_training(
    log: Sequence[ExerciseLogEntry],
    personal_records: Mapping[str, float] | None = None,
    catalog: Sequence[ExerciseCatalogEntry] = (),
    now: datetime | None = None,
    pr_dates: Mapping[str, datetime] | None = None,
) -> TrainingAnalysis:
    """Analyze a user's exercise history.

    Args:
        log: Every logged exercise session, in stored order.
        personal_records: Exercise name -> best weight. Only its size is used.
        catalog: Exercise reference data for muscle and equipment lookup.
        now: Reference instant; defaults to the current local time.
        pr_dates: Optional exercise name -> date the PR was set. When absent,
            ``days_since_last_pr`` falls back to a fixed default.

    Returns:
        A frozen TrainingAnalysis snapshot.
    """
    if now is None:
        now = datetime.now()
    personal_records = personal_records or {}

    frame = build_log_frame(log, now)
    ref = naive_reference(now)
    week = window(frame, now, WEEK_WINDOW_DAYS)
    month = window(frame, now, MONTH_WINDOW_DAYS)
    prior_week = between(
        frame,
        ref - timedelta(days=2 * WEEK_WINDOW_DAYS),
        ref - timedelta(days=WEEK_WINDOW_DAYS),
    )

    # Volume
    total_sets_last_week = int(week["total_sets"].sum())
    total_sets_last_month = int(month["total_sets"].sum())
    avg_sets_per_workout = total_sets_last_week / len(week) if len(week) else 0.0
    volume_trend = classify_volume_trend(
        total_sets_last_week, int(prior_week["total_sets"].sum())
    )

    # Muscle balance
    catalog_by_name = _index_catalog(catalog)
    muscles = month["name"].map(lambda name: _primary_muscle(catalog_by_name, name))
    distribution = count_occurrences(muscles)
    undertrained, overtrained = classify_muscle_balance(distribution)

    # Recovery
    if frame.empty:
        days_since_last_workout = NO_WORKOUT_SENTINEL_DAYS
    else:
        newest = frame["timestamp"].max().to_pydatetime()
        days_since_last_workout = days_between(ref, newest)
    workout_dates = set(frame["timestamp"].dt.date)
    consecutive_workout_days = count_consecutive_days(workout_dates, ref.date())

    # Progression
    total_workouts = len(log)
    progression_rate = classify_progression_rate(len(personal_records), total_workouts)

    return TrainingAnalysis(
        total_sets_last_week=total_sets_last_week,
        total_sets_last_month=total_sets_last_month,
        avg_sets_per_workout=avg_sets_per_workout,
        volume_trend=volume_trend,
        workouts_last_week=len(week),
        workouts_last_month=len(month),
        avg_workouts_per_week=len(month) / WEEKS_PER_MONTH,
        total_workouts=total_workouts,
        muscle_group_distribution=distribution,
        undertrained_muscles=undertrained,
        overtrained_muscles=overtrained,
        days_since_last_workout=days_since_last_workout,
        consecutive_workout_days=consecutive_workout_days,
        rest_days_last_week=WEEK_WINDOW_DAYS - len(week),
        pr_count=len(personal_records),
        days_since_last_pr=_days_since_last_pr(pr_dates, now),
        progression_rate=progression_rate,
        unique_exercises_last_month=int(month["name"].nunique()),
        most_frequent_exercises=tuple(rank_by_count(month["name"], TOP_EXERCISE_COUNT)),
        least_recent_exercises=_least_recent_exercises(frame, ref),
        preferred_workout_days=tuple(rank_by_count(frame["timestamp"].dt.day_name())),
        preferred_workout_time=DEFAULT_WORKOUT_TIME,
        avg_workout_duration=_mean_duration(log),
        exercises_by_muscle=_exercises_by_muscle(catalog),
        unexplored_equipment=_unexplored_equipment(catalog, set(month["name"])),
        reference_time=now,
    )


def _index_catalog(
    catalog: Sequence[ExerciseCatalogEntry],
) -> dict[str, ExerciseCatalogEntry]:
    """Name -> entry; the first entry wins when names repeat."""
    index: dict[str, ExerciseCatalogEntry] = {}
    for entry in catalog:
        index.setdefault(entry.name, entry)
    return index


def _primary_muscle(
    catalog_by_name: Mapping[str, ExerciseCatalogEntry], name: str
) -> str | None:
    entry = catalog_by_name.get(name)
    if entry is None or not entry.primary_muscle:
        return None
    return entry.primary_muscle


def _exercises_by_muscle(
    catalog: Sequence[ExerciseCatalogEntry],
) -> dict[str, tuple[str, ...]]:
    grouped: dict[str, list[str]] = {}
    for entry in catalog:
        if not entry.primary_muscle:
            continue
        names = grouped.setdefault(entry.primary_muscle, [])
        if len(names) < MAX_EXERCISES_PER_MUSCLE:
            names.append(entry.name)
    return {muscle: tuple(names) for muscle, names in grouped.items()}


def _unexplored_equipment(
    catalog: Sequence[ExerciseCatalogEntry], recent_names: set[str]
) -> tuple[str, ...]:
    """Equipment categories in the catalog not touched in the last month."""
    used = {e.equipment for e in catalog if e.name in recent_names and e.equipment}
    unexplored: list[str] = []
    for entry in catalog:
        if entry.equipment and entry.equipment not in used and entry.equipment not in unexplored:
            unexplored.append(entry.equipment)
    return tuple(unexplored)


def _least_recent_exercises(frame: pd.DataFrame, ref: datetime) -> tuple[str, ...]:
    """Exercises last performed before the monthly window, oldest first."""
    if frame.empty:
        return ()
    last_seen = frame.groupby("name", sort=False)["timestamp"].max()
    cutoff = ref - timedelta(days=MONTH_WINDOW_DAYS)
    stale = [(name, ts) for name, ts in last_seen.items() if ts < cutoff]
    stale.sort(key=lambda item: item[1])
    return tuple(str(name) for name, _ in stale[:MAX_LEAST_RECENT_EXERCISES])


def _days_since_last_pr(
    pr_dates: Mapping[str, datetime] | None, now: datetime
) -> int:
    if not pr_dates:
        return DEFAULT_DAYS_SINCE_LAST_PR
    valid = [ts for ts in (normalize_timestamp(v, now) for v in pr_dates.values()) if ts]
    if not valid:
        return DEFAULT_DAYS_SINCE_LAST_PR
    return days_between(naive_reference(now), max(valid))


def _mean_duration(log: Sequence[ExerciseLogEntry]) -> float:
    if not log:
        return 0.0
    return float(np.mean([entry.duration_seconds or 0 for entry in log]))
