"""Deload rule: a lighter week after a long hard block with no PRs."""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    DELOAD_MIN_CONSECUTIVE_DAYS,
    DELOAD_MIN_MONTHLY_WORKOUTS,
    ProgressionRate,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import AdjustAction, WorkoutRecommendation
from coach_engine.rules.base import CoachingRule


class DeloadRule(CoachingRule):
    """Recommends a deload week when high volume meets stalled progress."""

    rule_id = "deload"
    version = "1.0.0"
    order = 7
    recommendation_type = RecommendationType.DELOAD

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        needs_deload = (
            analysis.workouts_last_month >= DELOAD_MIN_MONTHLY_WORKOUTS
            and analysis.consecutive_workout_days >= DELOAD_MIN_CONSECUTIVE_DAYS
            and analysis.progression_rate == ProgressionRate.STALLED
        )
        if not needs_deload:
            return []

        return [
            WorkoutRecommendation(
                id="deload-needed",
                type=self.recommendation_type,
                priority=RecommendationPriority.HIGH,
                title="Time for Deload Week",
                description=(
                    "You've been training hard. Take a deload week to supercompensate."
                ),
                reasoning=(
                    "Accumulated fatigue masks fitness gains",
                    "Deload allows body to fully recover",
                    "Often leads to PR attempts after",
                    "Reduces injury risk",
                ),
                action=AdjustAction(
                    protocol="Reduce weight by 40-50% but keep exercises",
                    duration="1 week",
                    benefit="Return stronger and refreshed",
                ),
                confidence=85,
            )
        ]
