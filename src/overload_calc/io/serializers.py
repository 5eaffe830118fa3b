"""
JSON serialization for engine models.

Handles conversion between dataclasses and JSON-compatible dicts, used by
the CLI's --json output.  Nothing is written to disk.
"""

import json
from datetime import datetime
from typing import Any, Iterable

from ..core.models import ProgressionPlan, SessionRecord, WeekEntry, WorkoutLink


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


_RECORD_FIELDS = (
    "id",
    "timestamp",
    "exercise",
    "weight",
    "reps",
    "sets",
    "volume_per_set",
    "total_volume",
    "estimated_one_rep_max",
    "target_weight",
    "weight_difference",
    "workout_link",
)


def workout_link_to_dict(link: WorkoutLink) -> dict[str, Any]:
    """Convert WorkoutLink to JSON-compatible dict."""
    return {
        "url": link.url,
        "label": link.label,
        "family": link.family,
        "category": link.category,
    }


def session_record_to_dict(record: SessionRecord) -> dict[str, Any]:
    """
    Convert SessionRecord to JSON-compatible dict.

    Args:
        record: SessionRecord to convert

    Returns:
        Dict representation
    """
    return {
        "id": record.record_id,
        "timestamp": record.created_at.isoformat(timespec="seconds"),
        "exercise": record.exercise,
        "weight": record.weight,
        "reps": record.reps,
        "sets": record.sets,
        "volume_per_set": record.volume_per_set,
        "total_volume": record.total_volume,
        "estimated_one_rep_max": record.estimated_one_rep_max,
        "target_weight": record.target_weight,
        "weight_difference": record.weight_difference,
        "workout_link": workout_link_to_dict(record.workout_link),
    }


def dict_to_session_record(data: dict[str, Any]) -> SessionRecord:
    """
    Convert dict to SessionRecord.

    Args:
        data: Dict representation

    Returns:
        SessionRecord instance

    Raises:
        ValidationError: If keys are missing or values are invalid
    """
    missing = [k for k in _RECORD_FIELDS if k not in data]
    if missing:
        raise ValidationError(f"Session record missing fields: {missing}")

    link = data["workout_link"]
    try:
        return SessionRecord(
            record_id=int(data["id"]),
            created_at=datetime.fromisoformat(data["timestamp"]),
            exercise=str(data["exercise"]),
            weight=float(data["weight"]),
            reps=int(data["reps"]),
            sets=int(data["sets"]),
            volume_per_set=float(data["volume_per_set"]),
            total_volume=float(data["total_volume"]),
            estimated_one_rep_max=float(data["estimated_one_rep_max"]),
            target_weight=float(data["target_weight"]),
            weight_difference=float(data["weight_difference"]),
            workout_link=WorkoutLink(
                url=str(link["url"]),
                label=str(link["label"]),
                family=str(link["family"]),
                category=link["category"],
            ),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid session record: {e}") from e


def history_to_list(records: Iterable[SessionRecord]) -> list[dict[str, Any]]:
    """Convert a sequence of records (most recent first) to dicts."""
    return [session_record_to_dict(r) for r in records]


def week_entry_to_dict(entry: WeekEntry) -> dict[str, Any]:
    """Convert WeekEntry to JSON-compatible dict."""
    return {
        "week": entry.week_number,
        "weight": entry.weight,
        "sets": entry.sets,
        "reps": entry.reps_range,
    }


def progression_plan_to_dict(plan: ProgressionPlan) -> dict[str, Any]:
    """Convert ProgressionPlan to JSON-compatible dict."""
    return {
        "exercise_id": plan.exercise_id,
        "exercise": plan.display_name,
        "current_weight": plan.current_weight,
        "target_weight": plan.target_weight,
        "weight_to_gain": plan.weight_to_gain,
        "weekly_increase": plan.weekly_increase,
        "total_weeks_needed": plan.total_weeks_needed,
        "truncated": plan.truncated,
        "weeks": [week_entry_to_dict(w) for w in plan.weeks],
    }


def to_json(data: Any) -> str:
    """Dump serialized data with stable formatting."""
    return json.dumps(data, indent=2, ensure_ascii=False)
