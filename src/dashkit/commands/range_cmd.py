"""Command: print an integer range."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dashkit.commands._base import DashCommand

if TYPE_CHECKING:
    from dashkit.commands._context import AppContext


@click.command(
    "range",
    cls=DashCommand,
    examples="""\
  dashkit range 4
  dashkit range 0 10 --step 3
  dashkit range 5 0 --step -1""",
)
@click.argument("start", type=int)
@click.argument("end", type=int, required=False)
@click.option("--step", type=int, default=1, help="Increment (must not be zero).")
@click.pass_obj
def range_cmd(app: AppContext, start: int, end: int | None, step: int) -> None:
    """Integers from START up to END (exclusive); one argument counts from 0."""
    app.emit(app.sequence.range_(start, end, step))
