"""Aggregation helpers for exercise history: windows, counts, classifications.

All functions are pure. Timestamps are normalized to naive datetimes in the
reference clock before any comparison so mixed aware/naive input is safe.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable, Mapping

import pandas as pd

from coach_engine.models.enums import (
    CONSECUTIVE_SCAN_DAYS,
    OVERTRAINED_FRACTION,
    PROGRESSION_FAST_THRESHOLD,
    PROGRESSION_NORMAL_THRESHOLD,
    PROGRESSION_SLOW_THRESHOLD,
    UNDERTRAINED_FRACTION,
    VOLUME_TREND_TOLERANCE_PCT,
    ProgressionRate,
    VolumeTrend,
)
from coach_engine.models.exercise_log import ExerciseLogEntry

logger = logging.getLogger(__name__)

LOG_COLUMNS = ["timestamp", "name", "duration_seconds", "total_sets"]

# Range representable by datetime64[ns]; anything outside is treated as malformed
_EARLIEST_TIMESTAMP = datetime(1678, 1, 1)
_LATEST_TIMESTAMP = datetime(2262, 1, 1)


def normalize_timestamp(value: object, reference: datetime) -> datetime | None:
    """Coerce a log timestamp into a naive datetime on the reference clock.

    Args:
        value: The entry's ``date`` attribute (datetime, date, or anything else).
        reference: The analysis "now"; its tzinfo decides the target clock.

    Returns:
        A naive datetime, or None when *value* is not a usable date.
    """
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, date):
        ts = datetime.combine(value, time())
    else:
        return None

    if ts.tzinfo is not None:
        try:
            ts = ts.astimezone(reference.tzinfo).replace(tzinfo=None)
        except (OverflowError, ValueError):
            return None

    if not _EARLIEST_TIMESTAMP <= ts < _LATEST_TIMESTAMP:
        return None
    return ts


def naive_reference(now: datetime) -> datetime:
    """Strip tzinfo from *now* after normalization (the frame is naive)."""
    return now.replace(tzinfo=None)


def build_log_frame(entries: Iterable[ExerciseLogEntry], now: datetime) -> pd.DataFrame:
    """Build a DataFrame of the dated entries, preserving log order.

    Entries whose date cannot be used are dropped here; callers that need
    lifetime counts should count the raw entries instead.
    """
    rows = []
    skipped = 0
    for entry in entries:
        ts = normalize_timestamp(entry.date, now)
        if ts is None:
            skipped += 1
            continue
        rows.append((ts, entry.name, entry.duration_seconds or 0, entry.total_sets or 0))

    if skipped:
        logger.debug("Excluded %d undated log entries from time-based metrics", skipped)

    frame = pd.DataFrame(rows, columns=LOG_COLUMNS)
    frame["timestamp"] = pd.to_datetime(frame["timestamp"])
    frame["total_sets"] = frame["total_sets"].astype("int64")
    return frame


def window(frame: pd.DataFrame, now: datetime, days: int) -> pd.DataFrame:
    """Entries on or after ``now - days`` (inclusive boundary)."""
    cutoff = pd.Timestamp(naive_reference(now) - timedelta(days=days))
    return frame[frame["timestamp"] >= cutoff]


def between(frame: pd.DataFrame, start: datetime, end: datetime) -> pd.DataFrame:
    """Entries with ``start <= timestamp < end``."""
    ts = frame["timestamp"]
    return frame[(ts >= pd.Timestamp(start)) & (ts < pd.Timestamp(end))]


def count_occurrences(values: pd.Series) -> dict[str, int]:
    """Occurrences per distinct value, keyed in first-seen order.

    Missing values (NaN/None) are not counted.
    """
    if values.empty:
        return {}
    counts = values.groupby(values, sort=False).size()
    return {str(key): int(count) for key, count in counts.items()}


def rank_by_count(values: pd.Series, limit: int | None = None) -> list[str]:
    """Distinct values ordered by descending count, ties by first appearance."""
    counts = count_occurrences(values)
    ranked = [name for name, _ in sorted(counts.items(), key=lambda kv: -kv[1])]
    return ranked if limit is None else ranked[:limit]


def days_between(later: datetime, earlier: datetime) -> int:
    """Whole days elapsed from *earlier* to *later*, floored."""
    return (later - earlier) // timedelta(days=1)


def count_consecutive_days(
    workout_dates: set[date],
    today: date,
    horizon: int = CONSECUTIVE_SCAN_DAYS,
) -> int:
    """Length of the most recent run of training days within *horizon* days.

    Days are scanned backwards from *today*. Empty days before the first
    training day are skipped; the first empty day after it ends the run.
    """
    streak = 0
    for offset in range(horizon):
        if today - timedelta(days=offset) in workout_dates:
            streak += 1
        elif streak > 0:
            break
    return streak


def classify_muscle_balance(
    distribution: Mapping[str, int],
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split muscles into (undertrained, overtrained) relative to the mean count."""
    average = sum(distribution.values()) / max(len(distribution), 1)
    undertrained = tuple(
        muscle for muscle, count in distribution.items()
        if count < average * UNDERTRAINED_FRACTION
    )
    overtrained = tuple(
        muscle for muscle, count in distribution.items()
        if count > average * OVERTRAINED_FRACTION
    )
    return undertrained, overtrained


def classify_progression_rate(pr_count: int, workout_count: int) -> ProgressionRate:
    """Classify PRs-per-workout into a progression rate.

    An empty history is NORMAL rather than STALLED: there is nothing to
    judge yet.
    """
    if workout_count == 0:
        return ProgressionRate.NORMAL

    pr_rate = pr_count / max(workout_count, 1)
    if pr_rate > PROGRESSION_FAST_THRESHOLD:
        return ProgressionRate.FAST
    if pr_rate > PROGRESSION_NORMAL_THRESHOLD:
        return ProgressionRate.NORMAL
    if pr_rate > PROGRESSION_SLOW_THRESHOLD:
        return ProgressionRate.SLOW
    return ProgressionRate.STALLED


def classify_volume_trend(recent_sets: int, prior_sets: int) -> VolumeTrend:
    """Compare this week's sets against the previous week's."""
    if prior_sets == 0:
        return VolumeTrend.INCREASING if recent_sets > 0 else VolumeTrend.STABLE

    change = (recent_sets - prior_sets) / prior_sets
    if change > VOLUME_TREND_TOLERANCE_PCT:
        return VolumeTrend.INCREASING
    if change < -VOLUME_TREND_TOLERANCE_PCT:
        return VolumeTrend.DECREASING
    return VolumeTrend.STABLE
