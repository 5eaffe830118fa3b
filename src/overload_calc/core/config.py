"""
Configuration constants for the progressive-overload calculator.

All adjustable parameters are centralized here for easy tuning.
"""

from typing import Final

# =============================================================================
# INPUT BOUNDS
# =============================================================================

EXERCISE_NAME_MIN_LENGTH: Final[int] = 2
REPS_MIN: Final[int] = 1
REPS_MAX: Final[int] = 50
SETS_MIN: Final[int] = 1
SETS_MAX: Final[int] = 10

# =============================================================================
# ONE-REP-MAX (Epley)
# =============================================================================

EPLEY_DIVISOR: Final[float] = 30.0  # 1RM = w × (1 + reps / 30)
ONE_REP_MAX_DECIMALS: Final[int] = 1

# =============================================================================
# NEXT-SESSION TARGET WEIGHT
# =============================================================================

HIGH_REP_THRESHOLD: Final[int] = 8  # reps at or above this use the larger jump
HIGH_REP_INCREMENT: Final[float] = 0.025  # 2.5%
LOW_REP_INCREMENT: Final[float] = 0.02  # 2%
PLATE_STEP: Final[float] = 0.5  # Round targets to the nearest plate step

# =============================================================================
# WORKOUT LINK CATEGORIES (weight difference, exclusive upper bounds)
# =============================================================================

SMALL_DIFFERENCE_LIMIT: Final[float] = 5.0
MEDIUM_DIFFERENCE_LIMIT: Final[float] = 15.0

# =============================================================================
# SESSION HISTORY
# =============================================================================

HISTORY_CAPACITY: Final[int] = 10

# =============================================================================
# PROGRESSION PLANNER
# =============================================================================

COMPOUND_WEEKLY_INCREASE: Final[float] = 5.0
ISOLATION_WEEKLY_INCREASE: Final[float] = 2.5  # Lowest load category
MAX_PLAN_WEEKS: Final[int] = 8
TRAINING_DAYS: Final[tuple[str, ...]] = ("Monday", "Wednesday", "Friday")
WEIGHT_UNIT_LABEL: Final[str] = "lbs/kg"
