"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of computed sessions, the rolling
history and progression plans.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config import MAX_PLAN_WEEKS, WEIGHT_UNIT_LABEL
from ..core.exercises.base import ExerciseKind
from ..core.models import ProgressionPlan, SessionRecord
from ..core.planner import training_days

console = Console()

UNIT = WEIGHT_UNIT_LABEL


def _fmt_weight(value: float) -> str:
    """Plain number without a trailing '.0' (100.0 → "100", 102.5 → "102.5")."""
    return f"{value:g}"


def _fmt_volume(value: float) -> str:
    """Thousands-separated volume (3000 → "3,000")."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def format_session_result(record: SessionRecord) -> str:
    """
    Format one computed session as a text block.

    Args:
        record: SessionRecord to display

    Returns:
        Rich-markup string
    """
    link = record.workout_link
    lines = [
        "[bold green]Volume Calculated[/bold green]",
        f"Total Volume: [bold]{_fmt_volume(record.total_volume)}[/bold]",
        f"[bold]{escape(record.exercise)}[/bold]",
        f"{record.sets} sets × {record.reps} reps @ {_fmt_weight(record.weight)} {UNIT}",
        f"Volume per set: {_fmt_volume(record.volume_per_set)}",
        "",
        f"[cyan]Current Estimated Max (1RM):[/cyan] {_fmt_weight(record.estimated_one_rep_max)} {UNIT}",
        f"[green]Target Weight (Next Session):[/green] {_fmt_weight(record.target_weight)} {UNIT}",
        f"Weight Increase Needed: +{record.weight_difference:.1f} {UNIT}",
        f"[dim]Progressive overload tip: Aim for {_fmt_weight(record.target_weight)} {UNIT} "
        "in your next session for gradual strength gains.[/dim]",
        "",
        f"{escape(link.label)} → {escape(link.url)}",
    ]
    return "\n".join(lines)


def print_session_result(record: SessionRecord) -> None:
    """Print one computed session."""
    console.print(format_session_result(record))


def format_history_table(records: tuple[SessionRecord, ...]) -> Table:
    """
    Format session history as a Rich table, most recent first.

    Args:
        records: Records to display

    Returns:
        Rich Table object
    """
    table = Table(title="Training Log")

    table.add_column("#", justify="right", style="dim")
    table.add_column("Logged")
    table.add_column("Exercise", style="bold")
    table.add_column("Sets×Reps", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("1RM", justify="right", style="cyan")
    table.add_column("Target", justify="right", style="green")
    table.add_column("Volume", justify="right", style="bold")

    for i, record in enumerate(records, 1):
        table.add_row(
            str(i),
            record.created_at.strftime("%b %d %H:%M"),
            escape(record.exercise),
            f"{record.sets}×{record.reps}",
            _fmt_weight(record.weight),
            _fmt_weight(record.estimated_one_rep_max),
            _fmt_weight(record.target_weight),
            _fmt_volume(record.total_volume),
        )

    return table


def print_history(records: tuple[SessionRecord, ...]) -> None:
    """Print session history, or a hint when nothing is logged yet."""
    if not records:
        console.print(
            "[yellow]No training sessions logged yet. "
            "Calculate a session to start tracking![/yellow]"
        )
        return
    console.print(format_history_table(records))


def format_plan_table(plan: ProgressionPlan) -> Table:
    """Week-by-week table of a progression plan."""
    table = Table(title="Weekly Progression Plan")

    table.add_column("Week", justify="right")
    table.add_column("Weight", justify="right", style="bold")
    table.add_column("Sets", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Days")

    for entry in plan.weeks:
        days = ", ".join(day[:3] for day, _ in training_days(entry))
        table.add_row(
            str(entry.week_number),
            _fmt_weight(entry.weight),
            str(entry.sets),
            entry.reps_range,
            days,
        )

    return table


def print_progression_plan(plan: ProgressionPlan) -> None:
    """Print the plan summary, its weekly table and a note when truncated."""
    console.print(f"[bold cyan]Your {escape(plan.display_name)} Progressive Overload Plan[/bold cyan]")
    console.print(f"Current Weight: {_fmt_weight(plan.current_weight)} {UNIT}")
    console.print(f"Target Weight: {_fmt_weight(plan.target_weight)} {UNIT}")
    console.print(f"Weight to Gain: {_fmt_weight(plan.weight_to_gain)} {UNIT}")
    console.print(f"Estimated Timeline: {plan.total_weeks_needed} weeks")
    console.print(format_plan_table(plan))
    console.print("[dim]Focus: maintain proper form and complete all reps.[/dim]")
    if plan.truncated:
        console.print(
            f"[dim]Showing the first {MAX_PLAN_WEEKS} weeks. Continue this pattern "
            f"(+{_fmt_weight(plan.weekly_increase)} per week) until you reach "
            f"{_fmt_weight(plan.target_weight)} {UNIT}...[/dim]"
        )


def format_exercises_table(kinds: list[ExerciseKind]) -> Table:
    """Table of plan-able exercise kinds."""
    table = Table(title="Exercise Kinds")

    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("+/week", justify="right")
    table.add_column("Sets", justify="right")
    table.add_column("Reps", justify="right")

    for kind in kinds:
        table.add_row(
            kind.exercise_id,
            kind.display_name,
            kind.load_category,
            _fmt_weight(kind.weekly_increase),
            str(kind.sets),
            kind.reps_range,
        )

    return table


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")
