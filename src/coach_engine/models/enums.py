"""Enumerations and coaching constants for the coach engine.

Thresholds mirror the behaviour the recommendation cards were tuned
against. Confidence values are on a 0-100 scale.
"""

from enum import IntEnum, auto


class RecommendationPriority(IntEnum):
    """Recommendation urgency — higher value = shown first."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4


class RecommendationType(IntEnum):
    """Which coaching concern a recommendation addresses."""

    NEXT_WORKOUT = auto()
    MUSCLE_BALANCE = auto()
    RECOVERY = auto()
    PROGRESSION = auto()
    VARIETY = auto()
    VOLUME = auto()
    DELOAD = auto()


class ActionType(IntEnum):
    """What the user is asked to do."""

    WORKOUT = auto()
    REST = auto()
    ADJUST = auto()
    EXPLORE = auto()


class ProgressionRate(IntEnum):
    """PR-per-workout classification, ordered fastest first."""

    FAST = auto()
    NORMAL = auto()
    SLOW = auto()
    STALLED = auto()


class VolumeTrend(IntEnum):
    """Week-over-week direction of total sets."""

    INCREASING = auto()
    STABLE = auto()
    DECREASING = auto()


# ---------------------------------------------------------------------------
# Analysis windows
# ---------------------------------------------------------------------------
WEEK_WINDOW_DAYS = 7
MONTH_WINDOW_DAYS = 30

# Weekly average uses a fixed 4-week divisor over the 30-day window
WEEKS_PER_MONTH = 4

# Consecutive-day scan horizon
CONSECUTIVE_SCAN_DAYS = 14

# Sentinel for "no workout on record"
NO_WORKOUT_SENTINEL_DAYS = 999

# Used when PR dates are not tracked
DEFAULT_DAYS_SINCE_LAST_PR = 7

# ---------------------------------------------------------------------------
# Muscle balance — fractions of the average per-muscle count
# ---------------------------------------------------------------------------
UNDERTRAINED_FRACTION = 0.5
OVERTRAINED_FRACTION = 1.5
MAX_EXERCISES_PER_MUSCLE = 5
MAX_BALANCE_RECOMMENDATIONS = 2

# ---------------------------------------------------------------------------
# Progression rate thresholds (PRs per logged workout)
# ---------------------------------------------------------------------------
PROGRESSION_FAST_THRESHOLD = 0.15
PROGRESSION_NORMAL_THRESHOLD = 0.08
PROGRESSION_SLOW_THRESHOLD = 0.03

PR_ATTEMPT_MIN_DAYS = 14
PLATEAU_MIN_DAYS = 30
PR_ATTEMPT_TOP_EXERCISES = 2

# ---------------------------------------------------------------------------
# Variety
# ---------------------------------------------------------------------------
TOP_EXERCISE_COUNT = 3
MAX_LEAST_RECENT_EXERCISES = 5
MIN_UNIQUE_EXERCISES_PER_MONTH = 8
MAX_EXPLORE_CATEGORIES = 3
DEFAULT_EXPLORE_CATEGORIES = ("Cables", "Dumbbells", "Bodyweight")

# ---------------------------------------------------------------------------
# Volume trend — relative change in weekly sets treated as a real change
# ---------------------------------------------------------------------------
VOLUME_TREND_TOLERANCE_PCT = 0.10

# ---------------------------------------------------------------------------
# Recovery
# ---------------------------------------------------------------------------
REST_DAY_CONSECUTIVE_THRESHOLD = 5
NO_REST_MIN_WORKOUTS = 5
COMEBACK_MIN_DAYS = 4
COMEBACK_MAX_DAYS = 14  # exclusive
NEXT_WORKOUT_MAX_DAYS_SINCE = 2

# ---------------------------------------------------------------------------
# Frequency
# ---------------------------------------------------------------------------
LOW_FREQUENCY_PER_WEEK = 2
HIGH_FREQUENCY_PER_WEEK = 6
LOW_FREQUENCY_MIN_HISTORY = 4  # lifetime log must be longer than this

# ---------------------------------------------------------------------------
# Deload
# ---------------------------------------------------------------------------
DELOAD_MIN_MONTHLY_WORKOUTS = 16
DELOAD_MIN_CONSECUTIVE_DAYS = 3

# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------
MIN_CONFIDENCE = 60
MAX_RECOMMENDATIONS = 10

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
# Workout time of day is not tracked; every analysis reports this value
DEFAULT_WORKOUT_TIME = "Evening"
