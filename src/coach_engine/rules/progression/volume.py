"""Volume rule: keep weekly training frequency in a productive range.

Weekly frequency is the 30-day workout count divided by four.
"""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    HIGH_FREQUENCY_PER_WEEK,
    LOW_FREQUENCY_MIN_HISTORY,
    LOW_FREQUENCY_PER_WEEK,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import AdjustAction, WorkoutRecommendation
from coach_engine.rules.base import CoachingRule


class VolumeRule(CoachingRule):
    """Flags too-low or too-high weekly training frequency."""

    rule_id = "volume"
    version = "1.0.0"
    order = 6
    recommendation_type = RecommendationType.VOLUME

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        recommendations: list[WorkoutRecommendation] = []
        per_week = analysis.avg_workouts_per_week

        # New users with a short history are not nagged about frequency
        if (
            per_week < LOW_FREQUENCY_PER_WEEK
            and analysis.total_workouts > LOW_FREQUENCY_MIN_HISTORY
        ):
            recommendations.append(
                WorkoutRecommendation(
                    id="volume-increase-frequency",
                    type=self.recommendation_type,
                    priority=RecommendationPriority.MEDIUM,
                    title="Increase Training Frequency",
                    description=(
                        f"You're averaging {per_week:.1f} workouts per week. Aim for 3-4."
                    ),
                    reasoning=(
                        "More frequency = more muscle growth",
                        "Consistency is key to progress",
                        "3-4 sessions per week is optimal for most goals",
                    ),
                    action=AdjustAction(target="3-4 workouts per week"),
                    confidence=80,
                )
            )

        if per_week > HIGH_FREQUENCY_PER_WEEK:
            recommendations.append(
                WorkoutRecommendation(
                    id="volume-reduce-frequency",
                    type=self.recommendation_type,
                    priority=RecommendationPriority.MEDIUM,
                    title="Consider Reducing Frequency",
                    description=(
                        f"You're training {per_week:.1f} times per week. "
                        f"Make sure you're recovering."
                    ),
                    reasoning=(
                        "More isn't always better",
                        "Recovery is crucial",
                        "Risk of overtraining",
                    ),
                    action=AdjustAction(target="4-5 workouts per week with adequate rest"),
                    confidence=75,
                )
            )

        return recommendations
