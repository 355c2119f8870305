"""Workout coaching engine: training-history analysis and ranked recommendations."""

from coach_engine.analyzer import analyze_training
from coach_engine.engine import CoachEngine, generate_workout_recommendations

__all__ = ["CoachEngine", "analyze_training", "generate_workout_recommendations"]
