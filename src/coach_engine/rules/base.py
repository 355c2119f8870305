"""Abstract base class for all coaching rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, time, timedelta

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import RecommendationType
from coach_engine.models.recommendation import WorkoutRecommendation


class CoachingRule(ABC):
    """Base class for all rules in the coach engine.

    Each rule encapsulates one coaching concern and maps a TrainingAnalysis
    to zero or more WorkoutRecommendations. Rules are discovered
    automatically by the RuleRegistry and evaluated by the CoachEngine in
    ascending ``order``. Rules never see each other's output.

    Subclasses must define:
        rule_id: unique identifier (e.g. "recovery")
        version: semantic version string
        order: registration position; only affects tie-breaking in ranking
        recommendation_type: the RecommendationType this rule emits
        required_data: TrainingAnalysis fields that must be non-empty
        evaluate(): the rule's decision logic
    """

    rule_id: str
    version: str
    order: int
    recommendation_type: RecommendationType
    required_data: list[str] = []

    def has_required_data(self, analysis: TrainingAnalysis) -> bool:
        """Check that all required analysis fields are present and non-empty."""
        for field_name in self.required_data:
            value = getattr(analysis, field_name, None)
            if value is None:
                return False
            if isinstance(value, (list, tuple, dict)) and len(value) == 0:
                return False
        return True

    @abstractmethod
    def evaluate(self, analysis: TrainingAnalysis) -> list[WorkoutRecommendation]:
        """Evaluate this rule against the training analysis.

        Returns the rule's recommendations, or an empty list when the rule
        has nothing to say.
        """
        ...


def end_of_day(analysis: TrainingAnalysis) -> datetime | None:
    """Midnight following the analysis reference time, or None if unknown."""
    if analysis.reference_time is None:
        return None
    ref = analysis.reference_time
    return datetime.combine(ref.date() + timedelta(days=1), time(), tzinfo=ref.tzinfo)
