"""
YAML → ExerciseKind loader.

Loads exercise kinds from individual YAML files in the bundled
``src/overload_calc/exercises/`` directory.  Each file (e.g. squat.yaml)
contains a flat definition matching the ExerciseKind schema.

User overrides: place matching files in ``~/.overload-calc/exercises/``.
A user file is deep-merged over the bundled definition, so only changed
keys need to be listed.  A user file whose stem does not match any bundled
file is treated as a new exercise kind and added to the registry.

Usage (internal, called by registry.py):
    from .loader import load_exercises_from_yaml
    exercises = load_exercises_from_yaml()   # dict or None on failure
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import yaml

from .base import ExerciseKind

_REQUIRED_FIELDS: frozenset[str] = frozenset(
    {
        "exercise_id",
        "display_name",
        "load_category",
        "focus",
        "sets",
        "reps_low",
        "reps_high",
    }
)


def exercise_from_dict(d: dict) -> ExerciseKind:
    """Convert a raw dict (from YAML) to an ExerciseKind.

    Raises ValueError if any required field is absent or out of range.
    """
    missing = _REQUIRED_FIELDS - set(d)
    if missing:
        raise ValueError(f"ExerciseKind missing fields: {sorted(missing)}")

    aliases = tuple(str(a).strip().lower() for a in d.get("aliases") or ())

    kind = ExerciseKind(
        exercise_id=str(d["exercise_id"]).strip().lower(),
        display_name=str(d["display_name"]),
        load_category=str(d["load_category"]),  # type: ignore[arg-type]
        focus=str(d["focus"]),  # type: ignore[arg-type]
        sets=int(d["sets"]),
        reps_low=int(d["reps_low"]),
        reps_high=int(d["reps_high"]),
        aliases=aliases,
    )

    # The step is fixed by load_category; a file may only restate it.
    if "weekly_increase" in d and float(d["weekly_increase"]) != kind.weekly_increase:
        raise ValueError(
            f"weekly_increase {d['weekly_increase']} does not match "
            f"load_category '{kind.load_category}' (expected {kind.weekly_increase:g})"
        )
    return kind


def _load_yaml_file(path: Path) -> dict:
    """Load a YAML file; return {} and warn if it cannot be parsed."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"overload-calc: cannot read {path} ({exc})", stacklevel=2)
        return {}
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _get_bundled_exercises_dir() -> Path | None:
    """Return path to the bundled exercises/ data directory, or None if not found."""
    # loader.py lives at src/overload_calc/core/exercises/loader.py
    # three levels up → src/overload_calc/
    candidate = Path(__file__).parent.parent.parent / "exercises"
    return candidate if candidate.is_dir() else None


def _get_user_exercises_dir() -> Path | None:
    """Return ~/.overload-calc/exercises/ if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".overload-calc" / "exercises"
    return p if p.is_dir() else None


def load_exercises_from_yaml(
    bundled_dir: Path | None = None,
    user_dir: Path | None = None,
) -> dict[str, ExerciseKind] | None:
    """Return {exercise_id: ExerciseKind} loaded from per-kind YAML files.

    Loads each ``<exercise_id>.yaml`` from the bundled exercises/ directory.
    If a matching file exists in the user directory it is deep-merged over
    the bundled definition.  User-only files are loaded as new kinds.
    Invalid definitions are skipped with a warning.

    Args:
        bundled_dir: Override for the bundled directory (tests)
        user_dir: Override for the user directory (tests)

    Returns None (rather than raising) so the registry decides how to fail.
    """
    if bundled_dir is None:
        bundled_dir = _get_bundled_exercises_dir()
    if user_dir is None:
        user_dir = _get_user_exercises_dir()

    if bundled_dir is None and user_dir is None:
        return None

    result: dict[str, ExerciseKind] = {}

    stems: dict[str, Path] = {}  # stem → bundled path
    if bundled_dir is not None:
        for p in sorted(bundled_dir.glob("*.yaml")):
            stems[p.stem] = p

    user_only: list[Path] = []
    if user_dir is not None:
        for p in sorted(user_dir.glob("*.yaml")):
            if p.stem not in stems:
                user_only.append(p)

    for stem, bundled_path in stems.items():
        raw = _load_yaml_file(bundled_path)
        if not raw:
            continue
        if user_dir is not None:
            user_path = user_dir / f"{stem}.yaml"
            if user_path.exists():
                user_raw = _load_yaml_file(user_path)
                if user_raw:
                    raw = _deep_merge(raw, user_raw)
        try:
            kind = exercise_from_dict(raw)
            result[kind.exercise_id] = kind
        except (ValueError, TypeError) as exc:
            warnings.warn(
                f"overload-calc: skipping exercise '{stem}': {exc}",
                stacklevel=2,
            )

    for p in user_only:
        raw = _load_yaml_file(p)
        if not raw:
            continue
        try:
            kind = exercise_from_dict(raw)
            result[kind.exercise_id] = kind
        except (ValueError, TypeError) as exc:
            warnings.warn(
                f"overload-calc: skipping user exercise '{p.stem}': {exc}",
                stacklevel=2,
            )

    return result if result else None
