"""CoachEngine — the main orchestrator that produces coaching recommendations."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Sequence

from coach_engine.analyzer import analyze_training
from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.decision_trace import DecisionTrace, RuleResult, RuleStatus
from coach_engine.models.exercise_log import ExerciseCatalogEntry, ExerciseLogEntry, UserStats
from coach_engine.models.recommendation import WorkoutRecommendation
from coach_engine.ranking.ranker import RecommendationRanker
from coach_engine.registry import RuleRegistry

logger = logging.getLogger(__name__)


class CoachEngine:
    """Orchestrates history analysis, rule evaluation, and ranking.

    Usage:
        engine = CoachEngine()
        recommendations = engine.recommend(log, personal_records, catalog, now=now)
        recommendations, trace = engine.recommend_with_trace(log, personal_records, catalog)
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        ranker: RecommendationRanker | None = None,
    ) -> None:
        self.registry = registry or RuleRegistry()
        self.ranker = ranker or RecommendationRanker()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def recommend(
        self,
        log: Sequence[ExerciseLogEntry],
        personal_records: Mapping[str, float] | None = None,
        catalog: Sequence[ExerciseCatalogEntry] = (),
        user_stats: UserStats | None = None,
        now: datetime | None = None,
        pr_dates: Mapping[str, datetime] | None = None,
    ) -> list[WorkoutRecommendation]:
        """Analyze the history and return at most 10 ranked recommendations.

        Args:
            log: The user's exercise log.
            personal_records: Exercise name -> best recorded weight.
            catalog: Exercise reference data.
            user_stats: Aggregate stats from the achievement subsystem;
                accepted for API compatibility and not used.
            now: Reference instant. Pass it explicitly for reproducible output.
            pr_dates: Optional exercise name -> date the PR was set.

        Returns:
            Recommendations ordered by priority then confidence.
        """
        recommendations, _ = self.recommend_with_trace(
            log, personal_records, catalog, user_stats, now, pr_dates
        )
        return recommendations

    def recommend_with_trace(
        self,
        log: Sequence[ExerciseLogEntry],
        personal_records: Mapping[str, float] | None = None,
        catalog: Sequence[ExerciseCatalogEntry] = (),
        user_stats: UserStats | None = None,
        now: datetime | None = None,
        pr_dates: Mapping[str, datetime] | None = None,
    ) -> tuple[list[WorkoutRecommendation], DecisionTrace]:
        """Same as recommend(), plus the DecisionTrace explaining the result."""
        analysis = analyze_training(
            log, personal_records, catalog, now=now, pr_dates=pr_dates
        )
        return self.evaluate(analysis)

    def evaluate(
        self, analysis: TrainingAnalysis
    ) -> tuple[list[WorkoutRecommendation], DecisionTrace]:
        """Run every rule over a precomputed analysis and rank the candidates.

        Args:
            analysis: Frozen training analysis snapshot.

        Returns:
            A tuple of (ranked recommendations, DecisionTrace).
        """
        rule_results: list[RuleResult] = []
        candidates: list[WorkoutRecommendation] = []

        for rule in self.registry.get_all_rules():
            if not rule.has_required_data(analysis):
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.NOT_APPLICABLE,
                        explanation=f"Missing required data: {rule.required_data}",
                    )
                )
                continue

            produced = rule.evaluate(analysis)
            if produced:
                candidates.extend(produced)
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.FIRED,
                        recommendations=tuple(produced),
                        explanation=", ".join(r.id for r in produced),
                    )
                )
            else:
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        explanation="Rule returned no recommendations.",
                    )
                )
            logger.debug("Rule %s produced %d candidates", rule.rule_id, len(produced))

        ranked, notes = self.ranker.rank(candidates)
        logger.debug(notes)

        trace = DecisionTrace(
            rule_results=tuple(rule_results),
            analysis=analysis,
            final_recommendations=tuple(ranked),
            ranking_notes=notes,
        )
        return ranked, trace


def generate_workout_recommendations(
    log: Sequence[ExerciseLogEntry],
    personal_records: Mapping[str, float] | None = None,
    catalog: Sequence[ExerciseCatalogEntry] = (),
    user_stats: UserStats | None = None,
    now: datetime | None = None,
    pr_dates: Mapping[str, datetime] | None = None,
) -> list[WorkoutRecommendation]:
    """Quick recommendation generator using a default engine."""
    return CoachEngine().recommend(
        log, personal_records, catalog, user_stats, now=now, pr_dates=pr_dates
    )
