"""JSON serialization for recommendations and analysis snapshots.

Produces the camelCase shape the app's recommendation cards consume:
``{id, type, priority, title, description, reasoning, action: {type,
details}, confidence, expiresAt?, dismissable}``.

All functions are pure (no I/O).
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Iterable

from coach_engine.models.analysis import TrainingAnalysis
from coach_engine.models.enums import (
    ActionType,
    ProgressionRate,
    RecommendationPriority,
    RecommendationType,
    VolumeTrend,
)
from coach_engine.models.recommendation import RecommendationAction, WorkoutRecommendation

_TYPE_KEYS = {
    RecommendationType.NEXT_WORKOUT: "next-workout",
    RecommendationType.MUSCLE_BALANCE: "muscle-balance",
    RecommendationType.RECOVERY: "recovery",
    RecommendationType.PROGRESSION: "progression",
    RecommendationType.VARIETY: "variety",
    RecommendationType.VOLUME: "volume",
    RecommendationType.DELOAD: "deload",
}

_PRIORITY_KEYS = {
    RecommendationPriority.LOW: "low",
    RecommendationPriority.MEDIUM: "medium",
    RecommendationPriority.HIGH: "high",
    RecommendationPriority.URGENT: "urgent",
}

_ACTION_KEYS = {
    ActionType.WORKOUT: "workout",
    ActionType.REST: "rest",
    ActionType.ADJUST: "adjust",
    ActionType.EXPLORE: "explore",
}

_PROGRESSION_KEYS = {
    ProgressionRate.FAST: "fast",
    ProgressionRate.NORMAL: "normal",
    ProgressionRate.SLOW: "slow",
    ProgressionRate.STALLED: "stalled",
}

_TREND_KEYS = {
    VolumeTrend.INCREASING: "increasing",
    VolumeTrend.STABLE: "stable",
    VolumeTrend.DECREASING: "decreasing",
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def action_details(action: RecommendationAction) -> dict[str, Any]:
    """Detail payload of an action; unset fields are omitted."""
    details: dict[str, Any] = {}
    for f in dataclasses.fields(action):
        value = getattr(action, f.name)
        if value is None or value == ():
            continue
        details[_camel(f.name)] = list(value) if isinstance(value, tuple) else value
    return details


def to_json_dict(rec: WorkoutRecommendation) -> dict[str, Any]:
    """Convert a WorkoutRecommendation to a JSON-compatible dict."""
    payload: dict[str, Any] = {
        "id": rec.id,
        "type": _TYPE_KEYS[rec.type],
        "priority": _PRIORITY_KEYS[rec.priority],
        "title": rec.title,
        "description": rec.description,
        "reasoning": list(rec.reasoning),
        "action": {
            "type": _ACTION_KEYS[rec.action_type],
            "details": action_details(rec.action),
        },
        "confidence": rec.confidence,
        "dismissable": rec.dismissable,
    }
    if rec.expires_at is not None:
        payload["expiresAt"] = rec.expires_at.isoformat()
    return payload


def to_json_string(recs: Iterable[WorkoutRecommendation], indent: int = 2) -> str:
    """Serialize a recommendation list to a JSON string."""
    return json.dumps([to_json_dict(r) for r in recs], indent=indent)


def analysis_to_json_dict(analysis: TrainingAnalysis) -> dict[str, Any]:
    """Convert a TrainingAnalysis to a JSON-compatible dict with camelCase keys."""
    payload: dict[str, Any] = {}
    for f in dataclasses.fields(analysis):
        value = getattr(analysis, f.name)
        if isinstance(value, ProgressionRate):
            value = _PROGRESSION_KEYS[value]
        elif isinstance(value, VolumeTrend):
            value = _TREND_KEYS[value]
        elif isinstance(value, tuple):
            value = list(value)
        elif isinstance(value, dict):
            value = {k: list(v) if isinstance(v, tuple) else v for k, v in value.items()}
        elif value is not None and hasattr(value, "isoformat"):
            value = value.isoformat()
        payload[_camel(f.name)] = value
    return payload
