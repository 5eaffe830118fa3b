"""
Base types for exercise kinds.

ExerciseKind parameterises the progression planner: how much load is added
per week and which sets / rep range each planned week prescribes.
"""

from dataclasses import dataclass, field
from typing import Literal

from ..config import COMPOUND_WEEKLY_INCREASE, ISOLATION_WEEKLY_INCREASE

LoadCategory = Literal["compound", "isolation"]
TrainingFocus = Literal["strength", "hypertrophy"]


@dataclass(frozen=True)
class ExerciseKind:
    """
    Full configuration for one plan-able exercise.

    Isolation movements (e.g. curls) sit in the lowest load category and
    progress by smaller absolute steps than compound lifts.  The weekly
    step follows from load_category and cannot be configured separately.
    """

    # Identity
    exercise_id: str          # e.g. "bench-press", "bicep-curl"
    display_name: str         # e.g. "Bench Press"
    load_category: LoadCategory
    focus: TrainingFocus

    # Prescription per planned week
    sets: int
    reps_low: int
    reps_high: int

    # Alternative ids accepted on input (e.g. "bicep" for "bicep-curl")
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate exercise data."""
        if self.load_category not in ("compound", "isolation"):
            raise ValueError(f"Invalid load_category: {self.load_category}")
        if self.focus not in ("strength", "hypertrophy"):
            raise ValueError(f"Invalid focus: {self.focus}")
        if self.sets < 1:
            raise ValueError("sets must be at least 1")
        if self.reps_low < 1 or self.reps_high < self.reps_low:
            raise ValueError(
                f"Invalid rep range: {self.reps_low}-{self.reps_high}"
            )

    @property
    def weekly_increase(self) -> float:
        """Load added per week: 2.5 for isolation, 5.0 for compound lifts."""
        if self.load_category == "isolation":
            return ISOLATION_WEEKLY_INCREASE
        return COMPOUND_WEEKLY_INCREASE

    @property
    def reps_range(self) -> str:
        """Rep range as shown to the user, e.g. "5-8"."""
        return f"{self.reps_low}-{self.reps_high}"
