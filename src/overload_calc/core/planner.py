"""
Weekly progression planner.

Projects a linear load progression from the current working weight to a
goal weight:

  weeks_needed = ceil((goal − current) / weekly_increase)
  week_weight  = min(previous + weekly_increase, goal)

At most MAX_PLAN_WEEKS weeks are emitted.  When the goal needs more, the
plan is marked truncated and the caller tells the user to keep adding the
same weekly step until the goal is reached.
"""

import math

from .config import MAX_PLAN_WEEKS, TRAINING_DAYS
from .errors import InvalidProgressionRequest
from .exercises.registry import get_exercise, resolve_exercise_id
from .models import ProgressionPlan, WeekEntry


def _is_missing(value: object) -> bool:
    """Blank, zero, NaN and None all count as a missing field."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def _as_weight(value: object, name: str) -> float:
    try:
        weight = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise InvalidProgressionRequest(
            f"{name} must be a number, got {value!r}", "missing_field"
        ) from e
    if not math.isfinite(weight) or weight == 0:
        raise InvalidProgressionRequest("Please fill in all fields", "missing_field")
    return weight


def weeks_needed(current_weight: float, target_weight: float, weekly_increase: float) -> int:
    """Full number of weeks to reach the goal at a constant weekly step."""
    return math.ceil((target_weight - current_weight) / weekly_increase)


def generate_progression(
    exercise_id: str,
    current_weight: object,
    target_weight: object,
) -> ProgressionPlan:
    """
    Generate a weekly progression plan.

    Args:
        exercise_id: Exercise kind id or alias (e.g. "squat", "bicep")
        current_weight: Current working weight
        target_weight: Goal weight, strictly greater than current

    Returns:
        ProgressionPlan with up to MAX_PLAN_WEEKS week entries

    Raises:
        InvalidProgressionRequest: If a field is missing, the exercise is
            unknown, the target is not above the current weight, or the
            gap between them is not a finite number
    """
    if _is_missing(exercise_id) or _is_missing(current_weight) or _is_missing(target_weight):
        raise InvalidProgressionRequest("Please fill in all fields", "missing_field")

    current = _as_weight(current_weight, "current_weight")
    target = _as_weight(target_weight, "target_weight")

    if resolve_exercise_id(str(exercise_id)) is None:
        raise InvalidProgressionRequest(
            f"Unknown exercise '{exercise_id}'", "unknown_exercise"
        )
    kind = get_exercise(str(exercise_id))

    if target <= current:
        raise InvalidProgressionRequest(
            "Target weight must be greater than current weight",
            "target_not_greater",
        )
    if not math.isfinite(target - current):
        raise InvalidProgressionRequest(
            "Weight gap is too large to plan", "out_of_range"
        )

    step = kind.weekly_increase
    total_weeks = weeks_needed(current, target, step)

    weeks: list[WeekEntry] = []
    progression = current
    for week in range(1, min(total_weeks, MAX_PLAN_WEEKS) + 1):
        week_weight = min(progression + step, target)
        weeks.append(
            WeekEntry(
                week_number=week,
                weight=week_weight,
                sets=kind.sets,
                reps_range=kind.reps_range,
            )
        )
        progression = week_weight
        if progression >= target:
            break

    return ProgressionPlan(
        exercise_id=kind.exercise_id,
        display_name=kind.display_name,
        current_weight=current,
        target_weight=target,
        weekly_increase=step,
        total_weeks_needed=total_weeks,
        weeks=tuple(weeks),
    )


def training_days(entry: WeekEntry) -> list[tuple[str, str]]:
    """
    Daily prescription for one plan week.

    Returns:
        [(day, "4 sets × 5-8 reps @ 105.0"), ...] for each training day
    """
    line = f"{entry.sets} sets × {entry.reps_range} reps @ {entry.weight:g}"
    return [(day, line) for day in TRAINING_DAYS]
