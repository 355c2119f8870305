"""Recommendation ranker — turns all rule candidates into the final list."""

from __future__ import annotations

from coach_engine.models.recommendation import WorkoutRecommendation
from coach_engine.ranking.strategies import PriorityThenConfidence, RankingStrategy


class RecommendationRanker:
    """Ranks candidate recommendations.

    Uses a pluggable strategy pattern. Default is PriorityThenConfidence
    with a confidence floor of 60 and a limit of 10.
    """

    def __init__(self, strategy: RankingStrategy | None = None) -> None:
        self.strategy = strategy or PriorityThenConfidence()

    def rank(
        self, candidates: list[WorkoutRecommendation]
    ) -> tuple[list[WorkoutRecommendation], str]:
        """Rank candidates; returns the final list and notes for the decision trace."""
        return self.strategy.rank(candidates)
