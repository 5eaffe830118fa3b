"""
Pure metric computation functions.

Epley one-rep-max, next-session target weight and training volume, plus
the step that turns a validated entry into a SessionRecord.  Apart from the
record-id clock nothing here keeps state: identical inputs always give
identical outputs.
"""

import math
from datetime import datetime

from .config import (
    EPLEY_DIVISOR,
    HIGH_REP_INCREMENT,
    HIGH_REP_THRESHOLD,
    LOW_REP_INCREMENT,
    ONE_REP_MAX_DECIMALS,
    PLATE_STEP,
)
from .history import SessionHistory
from .links import classify_weight_difference, workout_link_for
from .models import SessionInput, SessionRecord, Volume
from .validation import validate_session_input

__all__ = [
    "round_half_up",
    "round_to_step",
    "one_rep_max",
    "target_weight",
    "training_volume",
    "classify_weight_difference",
    "workout_link_for",
    "build_session_record",
    "record_session",
]


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round with ties going up (towards +inf): 0.25 → 0.3 at one decimal.
    """
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def round_to_step(value: float, step: float) -> float:
    """Round to the nearest multiple of step, ties going up."""
    return math.floor(value / step + 0.5) * step


def one_rep_max(weight: float, reps: int) -> float:
    """
    Estimate one-rep-max with the Epley formula.

    1RM = w × (1 + reps / 30), rounded half-up to 1 decimal.
    A single rep already is the max, so reps == 1 returns weight unchanged.

    Args:
        weight: Weight lifted
        reps: Repetitions performed

    Returns:
        Estimated 1RM
    """
    if reps == 1:
        return weight
    estimate = weight * (1 + reps / EPLEY_DIVISOR)
    return round_half_up(estimate, ONE_REP_MAX_DECIMALS)


def target_weight(weight: float, reps: int) -> float:
    """
    Suggest the working weight for the next session.

    Higher-rep sets (8+) get a 2.5% jump, lower-rep sets 2%.  The result is
    rounded to the nearest 0.5 for plate loading.

    Args:
        weight: Weight lifted this session
        reps: Repetitions performed

    Returns:
        Target weight for the next session
    """
    fraction = HIGH_REP_INCREMENT if reps >= HIGH_REP_THRESHOLD else LOW_REP_INCREMENT
    return round_to_step(weight * (1 + fraction), PLATE_STEP)


def training_volume(weight: float, reps: int, sets: int) -> Volume:
    """Volume per set (w × reps) and total (per set × sets), unrounded."""
    per_set = weight * reps
    return Volume(per_set=per_set, total=per_set * sets)


class _RecordClock:
    """Epoch-millisecond ids that strictly increase within the process."""

    def __init__(self) -> None:
        self._last = 0

    def next_id(self, now: datetime) -> int:
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate


_clock = _RecordClock()


def build_session_record(
    session_input: SessionInput,
    now: datetime | None = None,
) -> SessionRecord:
    """
    Derive every metric of a validated entry into one SessionRecord.

    Args:
        session_input: Entry produced by validate_session_input()
        now: Creation time (default: current local time)

    Returns:
        Fully populated, immutable SessionRecord
    """
    if now is None:
        now = datetime.now()

    weight = session_input.weight
    reps = session_input.reps
    volume = training_volume(weight, reps, session_input.sets)
    target = target_weight(weight, reps)
    difference = target - weight

    return SessionRecord(
        record_id=_clock.next_id(now),
        created_at=now,
        exercise=session_input.exercise,
        weight=weight,
        reps=reps,
        sets=session_input.sets,
        volume_per_set=volume.per_set,
        total_volume=volume.total,
        estimated_one_rep_max=one_rep_max(weight, reps),
        target_weight=target,
        weight_difference=difference,
        workout_link=workout_link_for(session_input.exercise, difference),
    )


def record_session(
    history: SessionHistory,
    exercise: object,
    weight: object,
    reps: object,
    sets: object,
) -> SessionRecord:
    """
    Validate an entry, compute its record and push it onto history.

    Raises:
        InvalidInput: If validation fails; history is left untouched
    """
    session_input = validate_session_input(exercise, weight, reps, sets)
    record = build_session_record(session_input)
    history.append(record)
    return record
