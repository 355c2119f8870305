"""Serialization module — JSON output for recommendations and input loaders."""

from coach_engine.serialization.json_codec import (
    analysis_to_json_dict,
    to_json_dict,
    to_json_string,
)
from coach_engine.serialization.loaders import (
    load_exercise_catalog,
    load_exercise_log,
    load_personal_records,
)

__all__ = [
    "analysis_to_json_dict",
    "load_exercise_catalog",
    "load_exercise_log",
    "load_personal_records",
    "to_json_dict",
    "to_json_string",
]
