"""Workout recommendation — one coaching suggestion produced by a rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Union

from coach_engine.exceptions import InvalidRecommendationError
from coach_engine.models.enums import ActionType, RecommendationPriority, RecommendationType


@dataclass(frozen=True)
class MuscleFocusAction:
    """Train a muscle group, optionally with a weekly prescription."""

    action_type: ClassVar[ActionType] = ActionType.WORKOUT

    target_muscle: str
    suggested_exercises: tuple[str, ...] = field(default_factory=tuple)
    suggested_sets: str | None = None
    frequency: str | None = None


@dataclass(frozen=True)
class ExerciseAction:
    """Perform one specific exercise."""

    action_type: ClassVar[ActionType] = ActionType.WORKOUT

    exercise: str
    suggestion: str | None = None
    warmup: str | None = None


@dataclass(frozen=True)
class ScheduledSessionAction:
    """Train on the user's usual day and time."""

    action_type: ClassVar[ActionType] = ActionType.WORKOUT

    day: str
    time: str


@dataclass(frozen=True)
class EasySessionAction:
    """A reduced-intensity session after a break."""

    action_type: ClassVar[ActionType] = ActionType.WORKOUT

    intensity: str
    focus: str


@dataclass(frozen=True)
class RestAction:
    """Take time off."""

    action_type: ClassVar[ActionType] = ActionType.REST

    duration: str | None = None
    activities: tuple[str, ...] = field(default_factory=tuple)
    recommendation: str | None = None


@dataclass(frozen=True)
class AdjustAction:
    """Change an aspect of the current routine."""

    action_type: ClassVar[ActionType] = ActionType.ADJUST

    target_muscle: str | None = None
    recommendation: str | None = None
    strategies: tuple[str, ...] = field(default_factory=tuple)
    target: str | None = None
    protocol: str | None = None
    duration: str | None = None
    benefit: str | None = None


@dataclass(frozen=True)
class ExploreAction:
    """Try something new."""

    action_type: ClassVar[ActionType] = ActionType.EXPLORE

    suggestion: str | None = None
    categories: tuple[str, ...] = field(default_factory=tuple)


RecommendationAction = Union[
    MuscleFocusAction,
    ExerciseAction,
    ScheduledSessionAction,
    EasySessionAction,
    RestAction,
    AdjustAction,
    ExploreAction,
]


@dataclass(frozen=True)
class WorkoutRecommendation:
    """A single coaching suggestion.

    Rules produce these; the RecommendationRanker filters and orders them.
    """

    id: str
    type: RecommendationType
    priority: RecommendationPriority
    title: str
    description: str
    reasoning: tuple[str, ...]
    action: RecommendationAction
    confidence: int  # 0-100
    expires_at: datetime | None = None
    dismissable: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.confidence <= 100:
            raise InvalidRecommendationError(
                f"confidence must be in [0, 100], got {self.confidence} for {self.id}"
            )
        if not self.reasoning:
            raise InvalidRecommendationError(f"reasoning must not be empty for {self.id}")

    @property
    def action_type(self) -> ActionType:
        return self.action.action_type
