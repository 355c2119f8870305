"""Tests for MuscleBalanceRule — lagging and over-used muscle groups."""

from __future__ import annotations

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import ActionType, RecommendationPriority
from coach_engine.rules.planning.muscle_balance import MuscleBalanceRule


class TestMuscleBalanceRule:
    def setup_method(self) -> None:
        self.rule = MuscleBalanceRule()

    def test_requires_distribution(self) -> None:
        assert not self.rule.has_required_data(TrainingAnalysis())
        assert self.rule.has_required_data(
            TrainingAnalysis(muscle_group_distribution={"Chest": 3})
        )

    def test_single_undertrained_muscle(self) -> None:
        analysis = TrainingAnalysis(
            muscle_group_distribution={"Chest": 10, "Back": 10, "Legs": 1},
            undertrained_muscles=("Legs",),
            exercises_by_muscle={"Legs": ("Back Squat",)},
        )
        recs = self.rule.evaluate(analysis)
        assert len(recs) == 1
        rec = recs[0]
        assert rec.id == "balance-undertrained-Legs"
        assert rec.priority == RecommendationPriority.HIGH
        assert rec.confidence == 90
        assert rec.reasoning[0] == "Legs trained 1x vs average 7x"
        assert rec.action.suggested_sets == "3-4 sets"
        assert rec.action.frequency == "2-3 times per week"
        assert rec.action.suggested_exercises == ("Back Squat",)

    def test_average_rounds_half_up(self) -> None:
        analysis = TrainingAnalysis(
            muscle_group_distribution={"Chest": 4, "Calves": 1},
            undertrained_muscles=("Calves",),
        )
        rec = self.rule.evaluate(analysis)[0]
        assert rec.reasoning[0] == "Calves trained 1x vs average 3x"

    def test_only_first_two_undertrained(self) -> None:
        analysis = TrainingAnalysis(
            muscle_group_distribution={"Chest": 30, "Legs": 2, "Arms": 1, "Calves": 1},
            undertrained_muscles=("Legs", "Arms", "Calves"),
        )
        recs = self.rule.evaluate(analysis)
        assert [r.id for r in recs] == [
            "balance-undertrained-Legs",
            "balance-undertrained-Arms",
        ]
        assert recs[0].priority == RecommendationPriority.HIGH
        assert recs[1].priority == RecommendationPriority.MEDIUM

    def test_overtrained_first_only(self) -> None:
        analysis = TrainingAnalysis(
            muscle_group_distribution={"Chest": 20, "Back": 18, "Legs": 6, "Arms": 6},
            overtrained_muscles=("Chest", "Back"),
        )
        recs = self.rule.evaluate(analysis)
        assert len(recs) == 1
        rec = recs[0]
        assert rec.id == "balance-overtrained-Chest"
        assert rec.priority == RecommendationPriority.MEDIUM
        assert rec.confidence == 80
        assert rec.action_type == ActionType.ADJUST
        assert rec.reasoning[0] == "Chest trained 20x this month"
        assert rec.description.startswith("You're training chest very frequently")

    def test_balanced_distribution(self) -> None:
        analysis = TrainingAnalysis(muscle_group_distribution={"Chest": 5, "Back": 5})
        assert self.rule.evaluate(analysis) == []
