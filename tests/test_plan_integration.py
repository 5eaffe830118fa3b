"""
Integration tests for the progression planner.

Each test runs the full pipeline: exercise registry (bundled YAML) →
generate_progression.  Hand-computed expected weights are in comments.

Exercise kinds exercised: bicep-curl (2.5/week), squat, deadlift (5/week).
"""

import math
import textwrap

import pytest

from overload_calc.core.config import MAX_PLAN_WEEKS, TRAINING_DAYS
from overload_calc.core.errors import InvalidProgressionRequest
from overload_calc.core.exercises.base import ExerciseKind
from overload_calc.core.exercises.loader import exercise_from_dict, load_exercises_from_yaml
from overload_calc.core.exercises.registry import (
    EXERCISE_REGISTRY,
    get_exercise,
    resolve_exercise_id,
)
from overload_calc.core.models import ProgressionPlan, WeekEntry
from overload_calc.core.planner import generate_progression, training_days, weeks_needed


# ===========================================================================
# Helpers
# ===========================================================================

def _weights(plan: ProgressionPlan) -> list[float]:
    return [w.weight for w in plan.weeks]


def _write(path, text: str) -> None:
    path.write_text(textwrap.dedent(text), encoding="utf-8")


# ===========================================================================
# Registry
# ===========================================================================

class TestExerciseRegistry:
    def test_bundled_kinds_loaded(self):
        for kind_id in ("bench-press", "squat", "deadlift", "overhead-press",
                        "barbell-row", "bicep-curl"):
            assert kind_id in EXERCISE_REGISTRY

    def test_only_isolation_kind_is_slow(self):
        for kind in EXERCISE_REGISTRY.values():
            expected = 2.5 if kind.load_category == "isolation" else 5.0
            assert kind.weekly_increase == expected, kind.exercise_id

    def test_step_follows_load_category(self):
        curl = ExerciseKind("curl", "Curl", "isolation", "hypertrophy", 3, 8, 12)
        press = ExerciseKind("press", "Press", "compound", "strength", 4, 5, 8)
        assert curl.weekly_increase == 2.5
        assert press.weekly_increase == 5.0

    def test_aliases(self):
        assert resolve_exercise_id("bicep") == "bicep-curl"
        assert resolve_exercise_id("  SQUAT ") == "squat"
        assert resolve_exercise_id("yoga") is None

    def test_unknown_exercise(self):
        with pytest.raises(ValueError, match="Unknown exercise"):
            get_exercise("yoga")

    def test_prescriptions(self):
        assert get_exercise("deadlift").reps_range == "3-5"
        assert get_exercise("bicep-curl").reps_range == "8-12"
        assert get_exercise("bicep-curl").sets == 3
        assert get_exercise("squat").reps_range == "5-8"
        assert get_exercise("squat").sets == 4


class TestExerciseLoader:
    def test_user_override_is_merged(self, tmp_path):
        bundled = tmp_path / "bundled"
        user = tmp_path / "user"
        bundled.mkdir()
        user.mkdir()
        _write(bundled / "squat.yaml", """
            exercise_id: squat
            display_name: Squat
            load_category: compound
            focus: strength
            sets: 4
            reps_low: 5
            reps_high: 8
        """)
        _write(user / "squat.yaml", "sets: 5\n")
        _write(user / "hip-thrust.yaml", """
            exercise_id: hip-thrust
            display_name: Hip Thrust
            load_category: compound
            focus: hypertrophy
            sets: 3
            reps_low: 8
            reps_high: 12
        """)

        kinds = load_exercises_from_yaml(bundled_dir=bundled, user_dir=user)

        assert kinds is not None
        assert kinds["squat"].sets == 5
        assert kinds["squat"].reps_range == "5-8"
        assert kinds["hip-thrust"].weekly_increase == 5.0
        assert kinds["hip-thrust"].display_name == "Hip Thrust"

    def test_invalid_file_is_skipped_with_warning(self, tmp_path):
        _write(tmp_path / "broken.yaml", """
            exercise_id: broken
            display_name: Broken
        """)
        _write(tmp_path / "row.yaml", """
            exercise_id: row
            display_name: Row
            load_category: compound
            focus: strength
            sets: 4
            reps_low: 5
            reps_high: 8
        """)

        with pytest.warns(UserWarning, match="broken"):
            kinds = load_exercises_from_yaml(bundled_dir=tmp_path, user_dir=tmp_path / "none")

        assert kinds is not None
        assert set(kinds) == {"row"}

    def test_step_override_must_match_category(self, tmp_path):
        bundled = tmp_path / "bundled"
        user = tmp_path / "user"
        bundled.mkdir()
        user.mkdir()
        _write(bundled / "squat.yaml", """
            exercise_id: squat
            display_name: Squat
            load_category: compound
            focus: strength
            sets: 4
            reps_low: 5
            reps_high: 8
        """)
        _write(user / "squat.yaml", "weekly_increase: 2.5\n")

        with pytest.warns(UserWarning, match="weekly_increase"):
            kinds = load_exercises_from_yaml(bundled_dir=bundled, user_dir=user)

        assert kinds is None

    def test_restated_step_is_accepted(self):
        kind = exercise_from_dict({
            "exercise_id": "curl", "display_name": "Curl", "load_category": "isolation",
            "focus": "hypertrophy", "weekly_increase": 2.5, "sets": 3,
            "reps_low": 8, "reps_high": 12,
        })
        assert kind.weekly_increase == 2.5

    def test_bad_category_rejected(self):
        with pytest.raises(ValueError, match="load_category"):
            exercise_from_dict({
                "exercise_id": "x", "display_name": "X", "load_category": "cardio",
                "focus": "strength", "sets": 1,
                "reps_low": 1, "reps_high": 2,
            })


# ===========================================================================
# Planner
# ===========================================================================

class TestGenerateProgression:
    def test_bicep_fifty_to_sixty(self):
        # increase 2.5, weeks = ceil(10 / 2.5) = 4 → 52.5, 55, 57.5, 60
        plan = generate_progression("bicep", 50, 60)
        assert plan.exercise_id == "bicep-curl"
        assert plan.weekly_increase == 2.5
        assert plan.total_weeks_needed == 4
        assert _weights(plan) == [52.5, 55.0, 57.5, 60.0]
        assert [w.week_number for w in plan.weeks] == [1, 2, 3, 4]
        assert all(w.sets == 3 and w.reps_range == "8-12" for w in plan.weeks)
        assert not plan.truncated

    def test_last_week_capped_at_target(self):
        # ceil(12 / 5) = 3 → 105, 110, 112
        plan = generate_progression("squat", 100, 112)
        assert _weights(plan) == [105.0, 110.0, 112.0]
        assert plan.weeks[-1].weight == plan.target_weight

    def test_long_plan_is_truncated(self):
        # ceil(50 / 5) = 10 weeks needed, 8 shown → 105 … 140
        plan = generate_progression("squat", 100, 150)
        assert plan.total_weeks_needed == 10
        assert len(plan.weeks) == MAX_PLAN_WEEKS
        assert plan.truncated
        assert plan.weeks[-1].weight == 140.0

    def test_weights_non_decreasing_and_bounded(self):
        for kind_id in EXERCISE_REGISTRY:
            plan = generate_progression(kind_id, 42.5, 77.5)
            weights = _weights(plan)
            assert weights == sorted(weights)
            assert all(w <= 77.5 for w in weights)
            assert len(weights) == min(
                math.ceil((77.5 - 42.5) / plan.weekly_increase), MAX_PLAN_WEEKS
            )

    def test_string_weights_accepted(self):
        plan = generate_progression("deadlift", "180", "190")
        assert _weights(plan) == [185.0, 190.0]
        assert plan.weeks[0].reps_range == "3-5"

    def test_weight_to_gain(self):
        plan = generate_progression("bench-press", 60, 72.5)
        assert plan.weight_to_gain == 12.5

    def test_target_below_current_rejected(self):
        with pytest.raises(InvalidProgressionRequest) as exc_info:
            generate_progression("squat", 100, 90)
        assert exc_info.value.reason == "target_not_greater"

    def test_equal_target_rejected(self):
        with pytest.raises(InvalidProgressionRequest) as exc_info:
            generate_progression("squat", 100, 100)
        assert exc_info.value.reason == "target_not_greater"

    @pytest.mark.parametrize("exercise,current,target", [
        ("", 100, 120),
        ("squat", None, 120),
        ("squat", 100, ""),
        ("squat", 0, 120),
        ("squat", "nan", 120),
    ])
    def test_missing_field(self, exercise, current, target):
        with pytest.raises(InvalidProgressionRequest) as exc_info:
            generate_progression(exercise, current, target)
        assert exc_info.value.reason == "missing_field"

    def test_unknown_exercise(self):
        with pytest.raises(InvalidProgressionRequest) as exc_info:
            generate_progression("yoga", 10, 20)
        assert exc_info.value.reason == "unknown_exercise"

    def test_gap_too_large_rejected(self):
        # 1e308 - (-1e308) overflows to inf
        with pytest.raises(InvalidProgressionRequest) as exc_info:
            generate_progression("squat", -1e308, 1e308)
        assert exc_info.value.reason == "out_of_range"

    def test_no_state_between_calls(self):
        assert generate_progression("squat", 100, 120) == generate_progression("squat", 100, 120)


class TestPlanHelpers:
    def test_weeks_needed(self):
        assert weeks_needed(50, 60, 2.5) == 4
        assert weeks_needed(100, 101, 5) == 1

    def test_training_days(self):
        entry = WeekEntry(week_number=1, weight=105.0, sets=4, reps_range="5-8")
        days = training_days(entry)
        assert [d for d, _ in days] == list(TRAINING_DAYS)
        assert days[0][1] == "4 sets × 5-8 reps @ 105"

    def test_plan_rejects_weight_above_target(self):
        with pytest.raises(ValueError):
            ProgressionPlan(
                exercise_id="squat",
                display_name="Squat",
                current_weight=100,
                target_weight=110,
                weekly_increase=5,
                total_weeks_needed=2,
                weeks=(WeekEntry(week_number=1, weight=115, sets=4, reps_range="5-8"),),
            )
