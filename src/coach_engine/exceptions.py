"""Exception hierarchy for the coach engine."""

from __future__ import annotations


class CoachEngineError(Exception):
    """Base exception for all coach_engine errors."""


class InvalidRecommendationError(CoachEngineError, ValueError):
    """A recommendation was built with out-of-range or missing fields."""


class HistoryLoadError(CoachEngineError):
    """A history, catalog or records file could not be read or decoded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
