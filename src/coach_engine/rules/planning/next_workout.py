"""Next-workout rule: what to train in the next session.

Points a recently active user at their most neglected muscle group, and
on training days offers a session that matches their usual weekly pattern.
"""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    NEXT_WORKOUT_MAX_DAYS_SINCE,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import (
    MuscleFocusAction,
    ScheduledSessionAction,
    WorkoutRecommendation,
)
from coach_engine.rules.base import CoachingRule, end_of_day


class NextWorkoutRule(CoachingRule):
    """Suggests the focus of the next workout."""

    rule_id = "next_workout"
    version = "1.0.0"
    order = 1
    recommendation_type = RecommendationType.NEXT_WORKOUT

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        recommendations: list[WorkoutRecommendation] = []

        if (
            analysis.days_since_last_workout <= NEXT_WORKOUT_MAX_DAYS_SINCE
            and analysis.undertrained_muscles
        ):
            recommendations.append(self._balance_focus(analysis))

        if analysis.preferred_workout_days and analysis.days_since_last_workout == 0:
            recommendations.append(self._pattern_session(analysis))

        return recommendations

    def _balance_focus(self, analysis: TrainingAnalysis) -> WorkoutRecommendation:
        muscle = analysis.undertrained_muscles[0]
        count = analysis.muscle_group_distribution.get(muscle, 0)
        return WorkoutRecommendation(
            id="next-workout-balance",
            type=self.recommendation_type,
            priority=RecommendationPriority.HIGH,
            title=f"Train {muscle} Next",
            description=(
                f"Your {muscle.lower()} haven't been trained as much recently. "
                f"Focus on them in your next workout."
            ),
            reasoning=(
                f"{muscle} trained only {count} times this month",
                "Balanced training prevents imbalances and injury",
                "Weak points respond well to increased frequency",
            ),
            action=MuscleFocusAction(
                target_muscle=muscle,
                suggested_exercises=analysis.exercises_for_muscle(muscle),
            ),
            confidence=85,
            expires_at=end_of_day(analysis),
        )

    def _pattern_session(self, analysis: TrainingAnalysis) -> WorkoutRecommendation:
        day = analysis.preferred_workout_days[0]
        return WorkoutRecommendation(
            id="next-workout-pattern",
            type=self.recommendation_type,
            priority=RecommendationPriority.MEDIUM,
            title=f"{day} Workout Ready",
            description=(
                f"You typically train on {day}s. "
                f"Here's a workout that fits your pattern."
            ),
            reasoning=(
                f"You've completed {analysis.workouts_last_month} workouts this month",
                "Consistency builds habits",
                "Your body adapts to regular schedules",
            ),
            action=ScheduledSessionAction(day=day, time=analysis.preferred_workout_time),
            confidence=75,
            expires_at=end_of_day(analysis),
        )
