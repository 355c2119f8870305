"""Tests for aggregation helpers: timestamps, counts, streaks, classifications."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from coach_engine.math.aggregation import (
    classify_muscle_balance,
    classify_progression_rate,
    classify_volume_trend,
    count_consecutive_days,
    count_occurrences,
    days_between,
    normalize_timestamp,
    rank_by_count,
)
from coach_engine.models.enums import ProgressionRate, VolumeTrend

NOW = datetime(2026, 3, 18, 18, 0)


class TestNormalizeTimestamp:
    def test_naive_datetime_passes_through(self) -> None:
        ts = datetime(2026, 3, 1, 9, 30)
        assert normalize_timestamp(ts, NOW) == ts

    def test_date_becomes_midnight(self) -> None:
        assert normalize_timestamp(date(2026, 3, 1), NOW) == datetime(2026, 3, 1)

    def test_aware_converted_to_reference_clock(self) -> None:
        now = datetime(2026, 3, 18, 18, 0, tzinfo=timezone.utc)
        ts = datetime(2026, 3, 18, 20, 0, tzinfo=timezone(timedelta(hours=2)))
        assert normalize_timestamp(ts, now) == datetime(2026, 3, 18, 18, 0)

    @pytest.mark.parametrize("value", [None, "2026-03-01", 1710000000, float("nan")])
    def test_non_dates_rejected(self, value: object) -> None:
        assert normalize_timestamp(value, NOW) is None

    def test_out_of_range_rejected(self) -> None:
        assert normalize_timestamp(datetime(9999, 12, 31), NOW) is None

    @pytest.mark.parametrize(
        "value",
        [
            datetime(1, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=5))),
            datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5))),
        ],
    )
    def test_aware_edge_of_range_rejected(self, value: datetime) -> None:
        now = datetime(2026, 3, 18, 18, 0, tzinfo=timezone.utc)
        assert normalize_timestamp(value, now) is None


class TestCounting:
    def test_count_occurrences_first_seen_order(self) -> None:
        counts = count_occurrences(pd.Series(["b", "a", "b", None, "c", "a", "b"]))
        assert list(counts.items()) == [("b", 3), ("a", 2), ("c", 1)]

    def test_count_occurrences_empty(self) -> None:
        assert count_occurrences(pd.Series([], dtype=object)) == {}

    def test_rank_by_count_stable_ties(self) -> None:
        values = pd.Series(["x", "y", "z", "y", "x", "w"])
        assert rank_by_count(values) == ["x", "y", "z", "w"]
        assert rank_by_count(values, limit=2) == ["x", "y"]

    def test_days_between_floors(self) -> None:
        assert days_between(NOW, NOW - timedelta(days=3, hours=23)) == 3
        assert days_between(NOW, NOW) == 0


class TestConsecutiveDays:
    TODAY = date(2026, 3, 18)

    def _days(self, *offsets: int) -> set[date]:
        return {self.TODAY - timedelta(days=o) for o in offsets}

    def test_run_ending_today(self) -> None:
        assert count_consecutive_days(self._days(0, 1, 2), self.TODAY) == 3

    def test_leading_gap_skipped(self) -> None:
        assert count_consecutive_days(self._days(1, 2, 3, 4), self.TODAY) == 4

    def test_stops_at_first_gap_after_run(self) -> None:
        assert count_consecutive_days(self._days(0, 1, 3, 4, 5), self.TODAY) == 2

    def test_nothing_within_horizon(self) -> None:
        assert count_consecutive_days(self._days(14, 15, 16), self.TODAY) == 0

    def test_empty(self) -> None:
        assert count_consecutive_days(set(), self.TODAY) == 0


class TestMuscleBalance:
    def test_chest_back_legs(self) -> None:
        under, over = classify_muscle_balance({"Chest": 10, "Back": 10, "Legs": 1})
        assert under == ("Legs",)
        assert over == ()

    def test_overtrained(self) -> None:
        under, over = classify_muscle_balance({"Chest": 12, "Back": 4, "Legs": 5})
        # average 7: 12 > 10.5, nothing below 3.5
        assert under == ()
        assert over == ("Chest",)

    def test_empty(self) -> None:
        assert classify_muscle_balance({}) == ((), ())

    def test_single_muscle_is_balanced(self) -> None:
        assert classify_muscle_balance({"Chest": 9}) == ((), ())


class TestProgressionRate:
    @pytest.mark.parametrize(
        ("prs", "workouts", "expected"),
        [
            (0, 0, ProgressionRate.NORMAL),
            (5, 0, ProgressionRate.NORMAL),
            (0, 10, ProgressionRate.STALLED),
            (2, 10, ProgressionRate.FAST),
            (3, 20, ProgressionRate.NORMAL),  # exactly 0.15 is not fast
            (1, 10, ProgressionRate.NORMAL),
            (1, 20, ProgressionRate.SLOW),
            (1, 40, ProgressionRate.STALLED),
        ],
    )
    def test_classification(self, prs: int, workouts: int, expected: ProgressionRate) -> None:
        assert classify_progression_rate(prs, workouts) == expected


class TestVolumeTrend:
    def test_no_history_is_stable(self) -> None:
        assert classify_volume_trend(0, 0) == VolumeTrend.STABLE

    def test_first_week_is_increasing(self) -> None:
        assert classify_volume_trend(12, 0) == VolumeTrend.INCREASING

    def test_within_tolerance_is_stable(self) -> None:
        assert classify_volume_trend(21, 20) == VolumeTrend.STABLE
        assert classify_volume_trend(19, 20) == VolumeTrend.STABLE

    def test_beyond_tolerance(self) -> None:
        assert classify_volume_trend(30, 20) == VolumeTrend.INCREASING
        assert classify_volume_trend(10, 20) == VolumeTrend.DECREASING
