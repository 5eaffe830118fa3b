"""Planning commands: plan, exercises, and the interactive plan helper."""

import json
from typing import Annotated, Optional

import typer

from ...core.errors import InvalidProgressionRequest
from ...core.exercises.registry import EXERCISE_REGISTRY
from ...core.models import ProgressionPlan
from ...core.planner import generate_progression
from ...io.serializers import progression_plan_to_dict, to_json
from .. import views
from ..app import JsonOption, app


def _exercise_choices() -> str:
    return ", ".join(EXERCISE_REGISTRY)


def interactive_plan() -> ProgressionPlan | None:
    """Prompt for a plan request and print the plan, or None if rejected."""
    views.console.print()
    views.console.print(f"Exercises: [cyan]{_exercise_choices()}[/cyan]")
    exercise_id = views.console.input("Exercise: ").strip()
    current = views.console.input("Current weight: ").strip()
    target = views.console.input("Target weight: ").strip()

    try:
        progression = generate_progression(exercise_id, current, target)
    except InvalidProgressionRequest as e:
        views.print_error(str(e))
        return None

    views.console.print()
    views.print_progression_plan(progression)
    return progression


@app.command("plan")
def plan(
    exercise_id: Annotated[
        Optional[str],
        typer.Option("--exercise-kind", "-e", help="Exercise kind, e.g. squat, bicep-curl"),
    ] = None,
    current_weight: Annotated[
        Optional[str],
        typer.Option("--current", "-c", help="Current working weight"),
    ] = None,
    target_weight: Annotated[
        Optional[str],
        typer.Option("--target", "-t", help="Goal weight"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Project a weekly progression plan (up to 8 weeks) towards a goal weight.

      overload-calc plan --exercise-kind squat --current 100 --target 130
    """
    if exercise_id is None:
        views.console.print(f"Exercises: [cyan]{_exercise_choices()}[/cyan]")
        exercise_id = views.console.input("Exercise: ").strip()
    if current_weight is None:
        current_weight = views.console.input("Current weight: ").strip()
    if target_weight is None:
        target_weight = views.console.input("Target weight: ").strip()

    try:
        progression = generate_progression(exercise_id, current_weight, target_weight)
    except InvalidProgressionRequest as e:
        if json_out:
            print(json.dumps({"error": str(e), "reason": e.reason}))
        else:
            views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(to_json(progression_plan_to_dict(progression)))
        return

    views.print_progression_plan(progression)


@app.command("exercises")
def exercises(json_out: JsonOption = False) -> None:
    """List the exercise kinds the planner knows about."""
    kinds = list(EXERCISE_REGISTRY.values())

    if json_out:
        print(json.dumps([
            {
                "id": k.exercise_id,
                "name": k.display_name,
                "load_category": k.load_category,
                "focus": k.focus,
                "weekly_increase": k.weekly_increase,
                "sets": k.sets,
                "reps": k.reps_range,
                "aliases": list(k.aliases),
            }
            for k in kinds
        ], indent=2))
        return

    views.console.print(views.format_exercises_table(kinds))
