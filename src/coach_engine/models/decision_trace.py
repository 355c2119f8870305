"""Decision trace — audit trail of how the engine built its recommendation list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.recommendation import WorkoutRecommendation


class RuleStatus(IntEnum):
    """Whether a rule fired, was skipped, or was not applicable."""

    FIRED = auto()
    SKIPPED = auto()
    NOT_APPLICABLE = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule's evaluation during an engine call."""

    rule_id: str
    status: RuleStatus
    recommendations: tuple[WorkoutRecommendation, ...] = field(default_factory=tuple)
    explanation: str = ""


@dataclass(frozen=True)
class DecisionTrace:
    """Complete audit trail for a single engine.recommend() call.

    Records every rule's outcome plus the analysis the rules saw, so each
    suggestion shown to the user can be explained.
    """

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    analysis: TrainingAnalysis | None = None
    final_recommendations: tuple[WorkoutRecommendation, ...] = field(default_factory=tuple)
    ranking_notes: str = ""

    @property
    def candidate_count(self) -> int:
        return sum(len(r.recommendations) for r in self.rule_results)
