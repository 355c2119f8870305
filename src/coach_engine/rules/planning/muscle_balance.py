"""Muscle-balance rule: flag lagging and over-used muscle groups.

Counts come from the last 30 days of the log, mapped to each exercise's
primary muscle. A muscle is lagging below half the average count and
over-used above one and a half times the average.
"""

from __future__ import annotations

import math

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    MAX_BALANCE_RECOMMENDATIONS,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import (
    AdjustAction,
    MuscleFocusAction,
    WorkoutRecommendation,
)
from coach_engine.rules.base import CoachingRule


class MuscleBalanceRule(CoachingRule):
    """Recommends more work for lagging muscles and less for over-used ones."""

    rule_id = "muscle_balance"
    version = "1.0.0"
    order = 2
    recommendation_type = RecommendationType.MUSCLE_BALANCE
    required_data = ["muscle_group_distribution"]

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        recommendations: list[WorkoutRecommendation] = []
        # Rounded half-up for display
        average = math.floor(analysis.average_muscle_count() + 0.5)

        lagging = analysis.undertrained_muscles[:MAX_BALANCE_RECOMMENDATIONS]
        for idx, muscle in enumerate(lagging):
            count = analysis.muscle_group_distribution.get(muscle, 0)
            recommendations.append(
                WorkoutRecommendation(
                    id=f"balance-undertrained-{muscle}",
                    type=self.recommendation_type,
                    priority=(
                        RecommendationPriority.HIGH if idx == 0
                        else RecommendationPriority.MEDIUM
                    ),
                    title=f"Increase {muscle} Training",
                    description=(
                        f"Your {muscle.lower()} are lagging. "
                        f"Add 2-3 more exercises per week."
                    ),
                    reasoning=(
                        f"{muscle} trained {count}x vs average {average}x",
                        "Muscle imbalances can lead to injury",
                        "Balanced development improves overall strength",
                    ),
                    action=MuscleFocusAction(
                        target_muscle=muscle,
                        suggested_sets="3-4 sets",
                        frequency="2-3 times per week",
                        suggested_exercises=analysis.exercises_for_muscle(muscle),
                    ),
                    confidence=90,
                )
            )

        if analysis.overtrained_muscles:
            muscle = analysis.overtrained_muscles[0]
            count = analysis.muscle_group_distribution.get(muscle, 0)
            recommendations.append(
                WorkoutRecommendation(
                    id=f"balance-overtrained-{muscle}",
                    type=self.recommendation_type,
                    priority=RecommendationPriority.MEDIUM,
                    title=f"Reduce {muscle} Volume",
                    description=(
                        f"You're training {muscle.lower()} very frequently. "
                        f"Consider reducing volume to allow recovery."
                    ),
                    reasoning=(
                        f"{muscle} trained {count}x this month",
                        "Overtraining a muscle group can lead to fatigue",
                        "Recovery is when muscles grow",
                    ),
                    action=AdjustAction(
                        target_muscle=muscle,
                        recommendation="Reduce by 1-2 sessions per week",
                    ),
                    confidence=80,
                )
            )

        return recommendations
