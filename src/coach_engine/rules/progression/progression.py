"""Progression rule: PR attempts and plateau breaking.

Progression rate is the number of recorded PRs per logged workout,
classified by ``classify_progression_rate``.
"""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    PLATEAU_MIN_DAYS,
    PR_ATTEMPT_MIN_DAYS,
    PR_ATTEMPT_TOP_EXERCISES,
    ProgressionRate,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import (
    AdjustAction,
    ExerciseAction,
    WorkoutRecommendation,
)
from coach_engine.rules.base import CoachingRule

PLATEAU_STRATEGIES = (
    "Try different rep ranges (6-8 instead of 10-12)",
    "Add variation exercises",
    "Increase training frequency",
    "Consider a deload week",
)


class ProgressionRule(CoachingRule):
    """Encourages PR attempts on main lifts, or a change of stimulus when stuck."""

    rule_id = "progression"
    version = "1.0.0"
    order = 4
    recommendation_type = RecommendationType.PROGRESSION

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        recommendations: list[WorkoutRecommendation] = []
        stalled = analysis.progression_rate == ProgressionRate.STALLED

        if analysis.days_since_last_pr >= PR_ATTEMPT_MIN_DAYS and not stalled:
            top_exercises = analysis.most_frequent_exercises[:PR_ATTEMPT_TOP_EXERCISES]
            for exercise in top_exercises:
                recommendations.append(self._pr_attempt(analysis, exercise))

        if stalled and analysis.days_since_last_pr >= PLATEAU_MIN_DAYS:
            recommendations.append(
                WorkoutRecommendation(
                    id="progression-stalled",
                    type=self.recommendation_type,
                    priority=RecommendationPriority.HIGH,
                    title="Break Through Plateau",
                    description=(
                        "You haven't set a PR in a while. "
                        "Try these strategies to break through."
                    ),
                    reasoning=(
                        "Plateaus are normal but can be overcome",
                        "Changing stimulus can restart progress",
                        "Deload week might help",
                    ),
                    action=AdjustAction(strategies=PLATEAU_STRATEGIES),
                    confidence=75,
                )
            )

        return recommendations

    def _pr_attempt(
        self, analysis: TrainingAnalysis, exercise: str
    ) -> WorkoutRecommendation:
        return WorkoutRecommendation(
            id=f"progression-pr-{exercise}",
            type=self.recommendation_type,
            priority=RecommendationPriority.HIGH,
            title=f"Try for PR on {exercise}",
            description=(
                f"It's been {analysis.days_since_last_pr} days since your last PR. "
                f"You're ready!"
            ),
            reasoning=(
                "Consistent training builds strength",
                "Progressive overload drives growth",
                "You've been training regularly",
            ),
            action=ExerciseAction(
                exercise=exercise,
                suggestion="Add 2.5-5kg to your current max",
                warmup="Do 3-4 warmup sets before PR attempt",
            ),
            confidence=82,
        )
