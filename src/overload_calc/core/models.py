"""
Data models for overload-calc.

Plain dataclasses handed between the engine and its callers.  Records and
plan entries are frozen: once built they are never mutated, only the
containers holding them change.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .config import MAX_PLAN_WEEKS

LinkCategory = Literal["small", "medium", "large"]


@dataclass(frozen=True)
class SessionInput:
    """
    A validated training entry.

    Only built by the validator, so every field already satisfies the
    input bounds.  ``exercise`` is stored trimmed.
    """

    exercise: str
    weight: float
    reps: int
    sets: int


@dataclass(frozen=True)
class Volume:
    """Training volume of one entry."""

    per_set: float  # weight × reps
    total: float  # per_set × sets


@dataclass(frozen=True)
class WorkoutLink:
    """
    Suggested follow-up material for a session.

    The url is an inert search query; nothing here ever fetches it.
    """

    url: str
    label: str
    family: str  # matched keyword family, e.g. "bench" or "default"
    category: LinkCategory

    def __post_init__(self) -> None:
        if self.category not in ("small", "medium", "large"):
            raise ValueError(f"Invalid link category: {self.category}")


@dataclass(frozen=True)
class SessionRecord:
    """
    One computed session, as kept in the session history.

    ``record_id`` is the creation time in epoch milliseconds and doubles
    as the unique id of the record.
    """

    record_id: int
    created_at: datetime
    exercise: str
    weight: float
    reps: int
    sets: int
    volume_per_set: float
    total_volume: float
    estimated_one_rep_max: float
    target_weight: float
    weight_difference: float
    workout_link: WorkoutLink

    def __post_init__(self) -> None:
        """Validate record data."""
        if self.weight <= 0:
            raise ValueError("weight must be positive")
        if self.reps < 1 or self.sets < 1:
            raise ValueError("reps and sets must be at least 1")


@dataclass(frozen=True)
class WeekEntry:
    """One week of a progression plan."""

    week_number: int  # 1-indexed
    weight: float
    sets: int
    reps_range: str  # e.g. "5-8"

    def __post_init__(self) -> None:
        if self.week_number < 1:
            raise ValueError("week_number must be at least 1")
        if self.sets < 1:
            raise ValueError("sets must be at least 1")


@dataclass(frozen=True)
class ProgressionPlan:
    """
    Weekly weight progression from a current to a goal weight.

    ``weeks`` holds at most MAX_PLAN_WEEKS entries even when reaching the
    goal would take longer; ``total_weeks_needed`` keeps the full count.
    """

    exercise_id: str
    display_name: str
    current_weight: float
    target_weight: float
    weekly_increase: float
    total_weeks_needed: int
    weeks: tuple[WeekEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate plan invariants."""
        if len(self.weeks) > MAX_PLAN_WEEKS:
            raise ValueError(f"A plan holds at most {MAX_PLAN_WEEKS} weeks")
        previous = self.current_weight
        for entry in self.weeks:
            if entry.weight < previous or entry.weight > self.target_weight:
                raise ValueError(
                    f"Week {entry.week_number} weight {entry.weight} breaks progression"
                )
            previous = entry.weight

    @property
    def weight_to_gain(self) -> float:
        return self.target_weight - self.current_weight

    @property
    def truncated(self) -> bool:
        """True when the goal needs more weeks than the plan shows."""
        return self.total_weeks_needed > MAX_PLAN_WEEKS
