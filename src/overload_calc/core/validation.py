"""
Input validation for training entries.

Two layers:

  Blocking validation: validate_session_input() checks the four fields of
  an entry in order (exercise, weight, reps, sets) and raises InvalidInput
  on the first failing rule.  No metric is computed for a rejected entry.

  Soft checks: soft_check_number() / soft_check_text() produce live
  feedback for a single field.  They return a message or None and never
  block anything; callers still run the blocking validation on submit.
"""

import math

from .config import (
    EXERCISE_NAME_MIN_LENGTH,
    REPS_MAX,
    REPS_MIN,
    SETS_MAX,
    SETS_MIN,
)
from .errors import InvalidInput
from .models import SessionInput


def _parse_float(value: object) -> float | None:
    """Return value as a float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _parse_int(value: object) -> int | None:
    """Return value as an int, or None if it is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    return None


def _fmt_number(value: float) -> str:
    """Format a bound without a trailing '.0' for whole numbers."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def validate_exercise(exercise: object) -> str:
    """
    Validate an exercise name.

    Returns:
        The trimmed name

    Raises:
        InvalidInput: If the name is blank or shorter than 2 characters
    """
    if not isinstance(exercise, str) or not exercise.strip():
        raise InvalidInput("Please enter an exercise name", "exercise", "required")
    name = exercise.strip()
    if len(name) < EXERCISE_NAME_MIN_LENGTH:
        raise InvalidInput(
            f"Exercise name must be at least {EXERCISE_NAME_MIN_LENGTH} characters",
            "exercise",
            "too_short",
        )
    return name


def validate_weight(weight: object) -> float:
    """
    Validate a working weight.

    NaN, infinities and weights so large that a derived metric would
    overflow are rejected here so they never reach the formulas.

    Raises:
        InvalidInput: If weight is not a finite number greater than 0
    """
    value = _parse_float(weight)
    if value is None or math.isnan(value):
        raise InvalidInput("Please enter a valid weight", "weight", "not_a_number")
    if math.isinf(value):
        raise InvalidInput("Weight must be a finite number", "weight", "not_finite")
    if value <= 0:
        raise InvalidInput(
            "Please enter a valid weight (must be greater than 0)",
            "weight",
            "not_positive",
        )
    # Volume (w × reps × sets) is the largest derived value.
    if not math.isfinite(value * REPS_MAX * SETS_MAX):
        raise InvalidInput("Weight is too large", "weight", "not_finite")
    return value


def _validate_count(value: object, field: str, low: int, high: int, noun: str) -> int:
    count = _parse_int(value)
    if count is None:
        raise InvalidInput(f"{noun.capitalize()} must be a whole number", field, "not_integer")
    if count < low or count > high:
        raise InvalidInput(
            f"Please enter valid {noun} (between {low} and {high})",
            field,
            "out_of_range",
        )
    return count


def validate_reps(reps: object) -> int:
    """Validate repetitions: a whole number in [1, 50]."""
    return _validate_count(reps, "reps", REPS_MIN, REPS_MAX, "repetitions")


def validate_sets(sets: object) -> int:
    """Validate set count: a whole number in [1, 10]."""
    return _validate_count(sets, "sets", SETS_MIN, SETS_MAX, "sets")


def validate_session_input(
    exercise: object,
    weight: object,
    reps: object,
    sets: object,
) -> SessionInput:
    """
    Validate a full training entry.

    Fields are checked in order; the first failing rule wins.

    Args:
        exercise: Exercise name
        weight: Weight lifted (number or numeric string)
        reps: Repetitions per set
        sets: Number of sets

    Returns:
        SessionInput with normalized values

    Raises:
        InvalidInput: If any field fails validation
    """
    return SessionInput(
        exercise=validate_exercise(exercise),
        weight=validate_weight(weight),
        reps=validate_reps(reps),
        sets=validate_sets(sets),
    )


def check_session_input(
    exercise: object,
    weight: object,
    reps: object,
    sets: object,
) -> str | None:
    """Return the rejection reason for an entry, or None if it is valid."""
    try:
        validate_session_input(exercise, weight, reps, sets)
    except InvalidInput as e:
        return str(e)
    return None


def soft_check_number(
    raw: object,
    minimum: float | None = None,
    maximum: float | None = None,
) -> str | None:
    """
    Live feedback for one numeric field.

    Checks run in order: parseable, at least minimum, at most maximum,
    non-negative.

    Returns:
        A message describing the problem, or None if the value looks fine
    """
    value = _parse_float(raw)
    if value is None or math.isnan(value):
        return "Please enter a valid number"
    if minimum is not None and value < minimum:
        return f"Value must be at least {_fmt_number(minimum)}"
    if maximum is not None and value > maximum:
        return f"Value must not exceed {_fmt_number(maximum)}"
    if value < 0:
        return "Value must be positive"
    return None


def soft_check_text(raw: object, required: bool = True) -> str | None:
    """Live feedback for one text field."""
    text = raw.strip() if isinstance(raw, str) else ""
    if required and not text:
        return "This field is required"
    return None
