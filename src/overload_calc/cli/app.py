"""Shared Typer app object and option types."""

from typing import Annotated

import typer

# Shared --json option type used across all commands
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="overload-calc",
    help="Progressive-overload training calculator: volume, 1RM, next-session target and weekly plans.",
    no_args_is_help=False,
    invoke_without_command=True,
)
