"""Recovery rule: rest after long streaks, ease back in after a break.

The checks are exclusive and evaluated most severe first, so a user gets
at most one recovery card per call.
"""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    COMEBACK_MAX_DAYS,
    COMEBACK_MIN_DAYS,
    NO_REST_MIN_WORKOUTS,
    REST_DAY_CONSECUTIVE_THRESHOLD,
    RecommendationPriority,
    RecommendationType,
)
from coach_engine.models.recommendation import (
    EasySessionAction,
    RestAction,
    WorkoutRecommendation,
)
from coach_engine.rules.base import CoachingRule, end_of_day


class RecoveryRule(CoachingRule):
    """Recommends rest days or a gentle comeback session."""

    rule_id = "recovery"
    version = "1.0.0"
    order = 3
    recommendation_type = RecommendationType.RECOVERY

    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        if analysis.consecutive_workout_days >= REST_DAY_CONSECUTIVE_THRESHOLD:
            return [self._rest_day_needed(analysis)]

        if (
            analysis.rest_days_last_week == 0
            and analysis.workouts_last_week >= NO_REST_MIN_WORKOUTS
        ):
            return [self._schedule_rest_days()]

        if COMEBACK_MIN_DAYS <= analysis.days_since_last_workout < COMEBACK_MAX_DAYS:
            return [self._welcome_back(analysis)]

        return []

    def _rest_day_needed(self, analysis: TrainingAnalysis) -> WorkoutRecommendation:
        return WorkoutRecommendation(
            id="recovery-consecutive-days",
            type=self.recommendation_type,
            priority=RecommendationPriority.URGENT,
            title="Rest Day Needed",
            description=(
                f"You've worked out {analysis.consecutive_workout_days} days in a row. "
                f"Take a rest day to recover."
            ),
            reasoning=(
                "Recovery is crucial for muscle growth",
                "Overtraining can lead to injury and burnout",
                "CNS needs time to recover",
                "Sleep and nutrition optimize during rest",
            ),
            action=RestAction(
                duration="1-2 days",
                activities=("Light stretching", "Walking", "Meditation"),
            ),
            confidence=95,
            expires_at=end_of_day(analysis),
            dismissable=False,
        )

    def _schedule_rest_days(self) -> WorkoutRecommendation:
        return WorkoutRecommendation(
            id="recovery-no-rest",
            type=self.recommendation_type,
            priority=RecommendationPriority.HIGH,
            title="Schedule Rest Days",
            description=(
                "You had no rest days last week. Plan at least 1-2 rest days per week."
            ),
            reasoning=(
                "Muscles grow during rest, not training",
                "Risk of overtraining syndrome",
                "Mental recovery is equally important",
            ),
            action=RestAction(recommendation="1-2 rest days per week"),
            confidence=88,
        )

    def _welcome_back(self, analysis: TrainingAnalysis) -> WorkoutRecommendation:
        return WorkoutRecommendation(
            id="recovery-comeback",
            type=self.recommendation_type,
            priority=RecommendationPriority.MEDIUM,
            title="Welcome Back!",
            description=(
                f"It's been {analysis.days_since_last_workout} days. "
                f"Start with a lighter workout to ease back in."
            ),
            reasoning=(
                "After a break, start with 60-70% of normal intensity",
                "Reduces injury risk",
                "Allows body to readapt",
            ),
            action=EasySessionAction(
                intensity="Light to moderate",
                focus="Movement quality over weight",
            ),
            confidence=85,
        )
