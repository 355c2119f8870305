"""Ranking of candidate recommendations into the final list."""

from coach_engine.ranking.ranker import RecommendationRanker
from coach_engine.ranking.strategies import PriorityThenConfidence, RankingStrategy

__all__ = ["PriorityThenConfidence", "RankingStrategy", "RecommendationRanker"]
