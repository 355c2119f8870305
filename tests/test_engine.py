"""Tests for CoachEngine — orchestration, ranking and the decision trace."""

from __future__ import annotations

from datetime import datetime, timedelta

from coach_engine import CoachEngine, generate_workout_recommendations
from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.decision_trace import RuleStatus
from coach_engine.models.enums import ProgressionRate
from coach_engine.models.exercise_log import ExerciseCatalogEntry, ExerciseLogEntry, UserStats
from coach_engine.ranking import PriorityThenConfidence, RecommendationRanker
from coach_engine.registry import RuleRegistry


def _crowded_analysis() -> TrainingAnalysis:
    """An analysis where every rule fires; 11 candidates in total."""
    return TrainingAnalysis(
        workouts_last_month=30,
        avg_workouts_per_week=7.5,
        total_workouts=60,
        muscle_group_distribution={"Chest": 30, "Back": 10, "Legs": 2, "Arms": 1},
        undertrained_muscles=("Legs", "Arms"),
        overtrained_muscles=("Chest",),
        days_since_last_workout=0,
        consecutive_workout_days=5,
        days_since_last_pr=30,
        progression_rate=ProgressionRate.STALLED,
        unique_exercises_last_month=3,
        least_recent_exercises=("Deadlift",),
        preferred_workout_days=("Monday",),
    )


class TestCoachEngine:
    def test_empty_log(self, now: datetime) -> None:
        engine = CoachEngine()
        recs, trace = engine.recommend_with_trace([], {}, [], now=now)
        assert [r.id for r in recs] == ["variety-low"]
        assert "volume-increase-frequency" not in [r.id for r in recs]
        statuses = {r.rule_id: r.status for r in trace.rule_results}
        assert statuses == {
            "next_workout": RuleStatus.SKIPPED,
            "muscle_balance": RuleStatus.NOT_APPLICABLE,
            "recovery": RuleStatus.SKIPPED,
            "progression": RuleStatus.SKIPPED,
            "variety": RuleStatus.FIRED,
            "volume": RuleStatus.SKIPPED,
            "deload": RuleStatus.SKIPPED,
        }

    def test_trace_lists_rules_in_order(self, now: datetime) -> None:
        _, trace = CoachEngine().recommend_with_trace([], now=now)
        assert [r.rule_id for r in trace.rule_results][0] == "next_workout"
        assert [r.rule_id for r in trace.rule_results][-1] == "deload"
        assert trace.analysis is not None
        assert trace.ranking_notes != ""

    def test_every_rule_fires_and_output_is_truncated(self) -> None:
        recs, trace = CoachEngine().evaluate(_crowded_analysis())

        assert trace.candidate_count == 11
        assert all(r.status == RuleStatus.FIRED for r in trace.rule_results)
        assert [r.id for r in recs] == [
            "recovery-consecutive-days",
            "balance-undertrained-Legs",
            "next-workout-balance",
            "deload-needed",
            "progression-stalled",
            "balance-undertrained-Arms",
            "balance-overtrained-Chest",
            "next-workout-pattern",
            "volume-reduce-frequency",
            "variety-low",
        ]
        assert "variety-revisit" not in [r.id for r in recs]
        assert trace.ranking_notes == (
            "Ranked 10 of 11 candidates (0 below confidence 60, 1 beyond limit 10)"
        )
        assert trace.final_recommendations == tuple(recs)

    def test_fired_explanation_lists_ids(self) -> None:
        _, trace = CoachEngine().evaluate(_crowded_analysis())
        progression = next(r for r in trace.rule_results if r.rule_id == "progression")
        assert progression.explanation == "progression-stalled"

    def test_output_is_ranked_and_bounded(self, now: datetime, six_day_streak: list[ExerciseLogEntry],
                               catalog: list[ExerciseCatalogEntry]) -> None:
        recs = CoachEngine().recommend(six_day_streak, {}, catalog, now=now)
        assert len(recs) <= 10
        assert all(r.confidence >= 60 for r in recs)
        keys = [(-r.priority, -r.confidence) for r in recs]
        assert keys == sorted(keys)

    def test_idempotent(self, now: datetime, six_day_streak: list[ExerciseLogEntry],
                        catalog: list[ExerciseCatalogEntry]) -> None:
        engine = CoachEngine()
        first = engine.recommend(six_day_streak, {"Bench Press": 100.0}, catalog, now=now)
        second = engine.recommend(six_day_streak, {"Bench Press": 100.0}, catalog, now=now)
        assert first == second

    def test_user_stats_do_not_change_output(
        self, now: datetime, six_day_streak: list[ExerciseLogEntry],
        catalog: list[ExerciseCatalogEntry],
    ) -> None:
        engine = CoachEngine()
        stats = UserStats(total_workouts=500, current_streak=40, total_prs=12)
        assert engine.recommend(six_day_streak, {}, catalog, stats, now=now) == engine.recommend(
            six_day_streak, {}, catalog, now=now
        )

    def test_custom_ranker(self) -> None:
        ranker = RecommendationRanker(PriorityThenConfidence(limit=3))
        recs, _ = CoachEngine(ranker=ranker).evaluate(_crowded_analysis())
        assert len(recs) == 3

    def test_explicit_registry_is_not_rediscovered(self) -> None:
        recs, trace = CoachEngine(registry=RuleRegistry()).evaluate(_crowded_analysis())
        assert recs == []
        assert trace.rule_results == ()

    def test_generate_workout_recommendations(
        self, now: datetime, six_day_streak: list[ExerciseLogEntry],
        catalog: list[ExerciseCatalogEntry],
    ) -> None:
        recs = generate_workout_recommendations(six_day_streak, {}, catalog, now=now)
        assert recs == CoachEngine().recommend(six_day_streak, {}, catalog, now=now)
        assert recs[0].id == "recovery-consecutive-days"

    def test_generate_workout_recommendations_forwards_pr_dates(
        self, now: datetime, entry_factory
    ) -> None:
        log = [entry_factory(d, "Bench Press") for d in (0, 2, 4, 6, 8)]
        prs = {"Bench Press": 100.0}

        without_dates = generate_workout_recommendations(log, prs, now=now)
        with_dates = generate_workout_recommendations(
            log, prs, now=now, pr_dates={"Bench Press": now - timedelta(days=20)}
        )

        assert "progression-pr-Bench Press" not in [r.id for r in without_dates]
        pr_attempt = next(r for r in with_dates if r.id == "progression-pr-Bench Press")
        assert "20 days" in pr_attempt.description
