"""Session commands: calc, check, and interactive entry helpers."""

import json
from typing import Annotated, Optional

import typer

from ...core.config import REPS_MAX, REPS_MIN, SETS_MAX, SETS_MIN
from ...core.errors import InvalidInput
from ...core.history import SessionHistory
from ...core.metrics import build_session_record, record_session
from ...core.models import SessionRecord
from ...core.validation import (
    soft_check_number,
    soft_check_text,
    validate_session_input,
)
from ...io.serializers import session_record_to_dict, to_json
from .. import views
from ..app import JsonOption, app


def _prompt_field(
    label: str,
    minimum: float | None = None,
    maximum: float | None = None,
    numeric: bool = True,
) -> str:
    """
    Prompt for one field, printing live feedback without blocking.

    The final say belongs to validate_session_input(); this only warns.
    """
    raw = views.console.input(f"{label}: ").strip()
    hint = (
        soft_check_number(raw, minimum, maximum) if numeric else soft_check_text(raw)
    )
    if hint:
        views.print_warning(hint)
    return raw


def interactive_calculate(history: SessionHistory) -> SessionRecord | None:
    """
    Prompt for one entry, compute it and append it to history.

    Returns:
        The new record, or None if the entry was rejected
    """
    views.console.print()
    exercise = _prompt_field("Exercise name", numeric=False)
    weight = _prompt_field("Weight (lbs/kg)", minimum=0)
    reps = _prompt_field("Reps", minimum=REPS_MIN, maximum=REPS_MAX)
    sets = _prompt_field("Sets", minimum=SETS_MIN, maximum=SETS_MAX)

    try:
        record = record_session(history, exercise, weight, reps, sets)
    except InvalidInput as e:
        views.print_error(str(e))
        return None

    views.console.print()
    views.print_session_result(record)
    return record


@app.command("calc")
def calc(
    exercise: Annotated[
        Optional[str],
        typer.Option("--exercise", "-e", help="Exercise name, e.g. 'Bench Press'"),
    ] = None,
    weight: Annotated[
        Optional[str],
        typer.Option("--weight", "-w", help="Weight lifted (lbs or kg)"),
    ] = None,
    reps: Annotated[
        Optional[str],
        typer.Option("--reps", "-r", help=f"Reps per set ({REPS_MIN}-{REPS_MAX})"),
    ] = None,
    sets: Annotated[
        Optional[str],
        typer.Option("--sets", "-s", help=f"Number of sets ({SETS_MIN}-{SETS_MAX})"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Calculate volume, estimated 1RM and next-session target for one entry.

    Missing options are prompted for interactively:

      overload-calc calc --exercise "Bench Press" --weight 100 --reps 10 --sets 3
    """
    if exercise is None:
        exercise = _prompt_field("Exercise name", numeric=False)
    if weight is None:
        weight = _prompt_field("Weight (lbs/kg)", minimum=0)
    if reps is None:
        reps = _prompt_field("Reps", minimum=REPS_MIN, maximum=REPS_MAX)
    if sets is None:
        sets = _prompt_field("Sets", minimum=SETS_MIN, maximum=SETS_MAX)

    try:
        session_input = validate_session_input(exercise, weight, reps, sets)
    except InvalidInput as e:
        if json_out:
            print(json.dumps({"error": str(e), "field": e.field, "rule": e.rule}))
        else:
            views.print_error(str(e))
        raise typer.Exit(1)

    record = build_session_record(session_input)

    if json_out:
        print(to_json(session_record_to_dict(record)))
        return

    views.print_session_result(record)


@app.command("check")
def check(
    value: Annotated[
        str,
        typer.Option("--value", "-v", help="Raw field value to check"),
    ],
    minimum: Annotated[
        Optional[float],
        typer.Option("--min", help="Declared minimum"),
    ] = None,
    maximum: Annotated[
        Optional[float],
        typer.Option("--max", help="Declared maximum"),
    ] = None,
) -> None:
    """
    Live-feedback check for a single numeric field.

    Prints the feedback message, or "OK" when the value looks fine.
    Never fails: this check is advisory only.
    """
    hint = soft_check_number(value, minimum, maximum)
    if hint:
        views.print_warning(hint)
    else:
        views.print_success("OK")
