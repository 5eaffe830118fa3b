"""
Exercise kinds for overload-calc.

Each kind is described by an ExerciseKind object that parameterises the
progression planner.
"""

from .base import ExerciseKind
from .registry import EXERCISE_REGISTRY, get_exercise, resolve_exercise_id

__all__ = [
    "ExerciseKind",
    "EXERCISE_REGISTRY",
    "get_exercise",
    "resolve_exercise_id",
]
