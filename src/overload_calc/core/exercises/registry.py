"""
Exercise-kind registry.

All plan-able exercise kinds are registered here.  Use get_exercise() to
look up an ExerciseKind by its id (or one of its aliases).

Kinds are loaded from per-kind YAML files in the bundled
``src/overload_calc/exercises/`` directory at import time.  If nothing can
be loaded a RuntimeError is raised: the planner cannot work without them.

User overrides: place matching files in ``~/.overload-calc/exercises/``.
"""

from .base import ExerciseKind


def _build_registry() -> dict[str, ExerciseKind]:
    from .loader import load_exercises_from_yaml

    loaded = load_exercises_from_yaml()
    if not loaded:
        raise RuntimeError(
            "overload-calc: no exercise kinds could be loaded from YAML. "
            "Check that src/overload_calc/exercises/*.yaml files are present and valid."
        )
    return loaded


EXERCISE_REGISTRY: dict[str, ExerciseKind] = _build_registry()


def resolve_exercise_id(exercise_id: str) -> str | None:
    """Map an id or alias (case-insensitive) to a registered id, or None."""
    key = exercise_id.strip().lower()
    if key in EXERCISE_REGISTRY:
        return key
    for kind in EXERCISE_REGISTRY.values():
        if key in kind.aliases:
            return kind.exercise_id
    return None


def get_exercise(exercise_id: str) -> ExerciseKind:
    """
    Return the ExerciseKind for the given id or alias.

    Raises:
        ValueError: If exercise_id is not in the registry
    """
    resolved = resolve_exercise_id(exercise_id)
    if resolved is None:
        valid = ", ".join(EXERCISE_REGISTRY)
        raise ValueError(f"Unknown exercise '{exercise_id}'. Valid IDs: {valid}")
    return EXERCISE_REGISTRY[resolved]
