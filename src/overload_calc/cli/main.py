"""
CLI entry point using Typer.

Provides commands for the progressive-overload calculator:
- calc: Compute volume, estimated 1RM and next-session target
- plan: Generate a weekly progression plan
- exercises: List plan-able exercise kinds
- check: Live-feedback check for a single field

Run without a command for interactive mode.  The training log only lives
for the duration of one interactive run.
"""

import typer

from ..core.history import SessionHistory
from . import views
from .app import app
from .commands import planning, sessions  # noqa: F401  (registers commands)
from .commands.planning import interactive_plan
from .commands.sessions import interactive_calculate


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    Progressive-overload calculator. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return  # A sub-command was given; let it handle things

    history = SessionHistory()

    views.console.print()
    views.console.print("[bold cyan]overload-calc[/bold cyan]: progressive overload calculator")

    menu = {
        "1": "Calculate a session",
        "2": "Show training log",
        "3": "Progression plan",
        "0": "Quit",
    }

    while True:
        views.console.print()
        for key, desc in menu.items():
            views.console.print(f"  \\[{key}] {desc}")
        views.console.print()

        try:
            choice = views.console.input("Choose [1]: ").strip() or "1"
        except EOFError:
            break

        if choice == "0":
            break

        try:
            if choice == "1":
                interactive_calculate(history)
            elif choice == "2":
                views.print_history(history.all())
            elif choice == "3":
                interactive_plan()
            else:
                views.print_error(f"Unknown choice: {choice}")
        except EOFError:
            break

    if not history.is_empty():
        views.print_info(f"Session ended with {len(history)} logged entries.")
    raise typer.Exit(0)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
