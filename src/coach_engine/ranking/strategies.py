"""Ranking strategies for ordering candidate recommendations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coach_engine.models.enums import MAX_RECOMMENDATIONS, MIN_CONFIDENCE
from coach_engine.models.recommendation import WorkoutRecommendation


class RankingStrategy(ABC):
    """Base class for ranking strategies."""

    @abstractmethod
    def rank(
        self, candidates: list[WorkoutRecommendation]
    ) -> tuple[list[WorkoutRecommendation], str]:
        """Filter and order candidates into the list shown to the user.

        Returns the ranked recommendations and a human-readable explanation
        of what was dropped and why.
        """
        ...


class PriorityThenConfidence(RankingStrategy):
    """Ranking strategy: confident recommendations, most urgent first.

    1. Drop candidates below ``min_confidence``.
    2. Sort by priority (URGENT > HIGH > MEDIUM > LOW), then confidence,
       both descending. The sort is stable, so remaining ties keep rule
       registration order.
    3. Keep the first ``limit``.
    """

    def __init__(
        self,
        min_confidence: int = MIN_CONFIDENCE,
        limit: int = MAX_RECOMMENDATIONS,
    ) -> None:
        self.min_confidence = min_confidence
        self.limit = limit

    def rank(
        self, candidates: list[WorkoutRecommendation]
    ) -> tuple[list[WorkoutRecommendation], str]:
        if not candidates:
            return [], "No recommendations to rank."

        confident = [c for c in candidates if c.confidence >= self.min_confidence]
        ordered = sorted(confident, key=lambda c: (-c.priority, -c.confidence))
        ranked = ordered[: self.limit]

        notes = (
            f"Ranked {len(ranked)} of {len(candidates)} candidates "
            f"({len(candidates) - len(confident)} below confidence {self.min_confidence}, "
            f"{len(ordered) - len(ranked)} beyond limit {self.limit})"
        )
        return ranked, notes
