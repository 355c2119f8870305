"""Data models for the coach engine."""

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.decision_trace import DecisionTrace, RuleResult, RuleStatus
from coach_engine.models.enums import (
    ActionType,
    ProgressionRate,
    RecommendationPriority,
    RecommendationType,
    VolumeTrend,
)
from coach_engine.models.exercise_log import ExerciseCatalogEntry, ExerciseLogEntry, UserStats
from coach_engine.models.recommendation import (
    AdjustAction,
    EasySessionAction,
    ExerciseAction,
    ExploreAction,
    MuscleFocusAction,
    RecommendationAction,
    RestAction,
    ScheduledSessionAction,
    WorkoutRecommendation,
)

__all__ = [
    "ActionType",
    "AdjustAction",
    "DecisionTrace",
    "EasySessionAction",
    "ExerciseAction",
    "ExerciseCatalogEntry",
    "ExerciseLogEntry",
    "ExploreAction",
    "MuscleFocusAction",
    "ProgressionRate",
    "RecommendationAction",
    "RecommendationPriority",
    "RecommendationType",
    "RestAction",
    "RuleResult",
    "RuleStatus",
    "ScheduledSessionAction",
    "TrainingAnalysis",
    "UserStats",
    "VolumeTrend",
    "WorkoutRecommendation",
]
