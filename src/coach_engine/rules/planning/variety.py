"""Variety rule: broaden a narrow exercise selection."""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    DEFAULT_EXPLORE_CATEGORIES,
    MAX_EXPLORE_CATEGORIES,
    MIN_UNIQUE_EXERCISES_PER_MONTH,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import (
    ExerciseAction,
    ExploreAction,
    WorkoutRecommendation,
)
from coach_engine.rules.base import CoachingRule


class VarietyRule(CoachingRule):
    """Suggests new movements and revisiting exercises dropped from rotation."""

    rule_id = "variety"
    version = "1.0.0"
    order = 5
    recommendation_type = RecommendationType.VARIETY

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        recommendations: list[WorkoutRecommendation] = []

        if analysis.unique_exercises_last_month < MIN_UNIQUE_EXERCISES_PER_MONTH:
            recommendations.append(
                WorkoutRecommendation(
                    id="variety-low",
                    type=self.recommendation_type,
                    priority=RecommendationPriority.MEDIUM,
                    title="Add Exercise Variety",
                    description=(
                        f"You've only done {analysis.unique_exercises_last_month} "
                        f"different exercises this month. Try new movements!"
                    ),
                    reasoning=(
                        "Variety prevents adaptation and plateaus",
                        "Different exercises target muscles from new angles",
                        "Keeps training interesting",
                    ),
                    action=ExploreAction(
                        suggestion="Try 2-3 new exercises this week",
                        categories=self._explore_categories(analysis),
                    ),
                    confidence=70,
                )
            )

        if analysis.least_recent_exercises:
            exercise = analysis.least_recent_exercises[0]
            recommendations.append(
                WorkoutRecommendation(
                    id="variety-revisit",
                    type=self.recommendation_type,
                    priority=RecommendationPriority.LOW,
                    title=f"Revisit {exercise}",
                    description=(
                        "You haven't done this exercise in a while. "
                        "Consider adding it back."
                    ),
                    reasoning=(
                        "Rotating exercises provides new stimulus",
                        "May have gotten stronger in meantime",
                    ),
                    action=ExerciseAction(exercise=exercise),
                    confidence=65,
                )
            )

        return recommendations

    @staticmethod
    def _explore_categories(analysis: TrainingAnalysis) -> tuple[str, ...]:
        if analysis.unexplored_equipment:
            return analysis.unexplored_equipment[:MAX_EXPLORE_CATEGORIES]
        return DEFAULT_EXPLORE_CATEGORIES
