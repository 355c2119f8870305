"""Environment-variable-based configuration for the nightly digest scheduler."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.environ.get("COACH_DATA_DIR", "~/.coach_engine")).expanduser()
HISTORY_PATH: Path = Path(
    os.environ.get("COACH_HISTORY_PATH", str(DATA_DIR / "workout_history.json"))
).expanduser()
CATALOG_PATH: Path = Path(
    os.environ.get("COACH_CATALOG_PATH", str(DATA_DIR / "exercises.json"))
).expanduser()
RECORDS_PATH: Path = Path(
    os.environ.get("COACH_RECORDS_PATH", str(DATA_DIR / "personal_records.json"))
).expanduser()
OUTPUT_PATH: Path = Path(
    os.environ.get("COACH_OUTPUT_PATH", str(DATA_DIR / "recommendations.json"))
).expanduser()
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
