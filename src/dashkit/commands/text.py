"""Command group: string helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dashkit.commands._base import DashGroup
from dashkit.domain.strings import CaseStyle

if TYPE_CHECKING:
    from dashkit.commands._context import AppContext

_TEXT_EXAMPLES = """\
  dashkit text case "Foo Bar" --style kebab
  dashkit text trim "###hello###" --chars "#"
  dashkit text truncate "Hello world" --length 8
  dashkit text pad 42 --length 5 --char 0"""


@click.group(cls=DashGroup, examples=_TEXT_EXAMPLES)
@click.pass_obj
def text(app: AppContext) -> None:
    """Convert, trim, truncate, and pad strings."""


@text.command(
    "case",
    examples="""\
  dashkit text case "__FOO_BAR__"
  dashkit text case fooBarBaz --style snake""",
)
@click.argument("value")
@click.option(
    "--style",
    type=click.Choice([s.value for s in CaseStyle]),
    default=CaseStyle.CAMEL.value,
    help="Target case convention.",
)
@click.pass_obj
def case_cmd(app: AppContext, value: str, style: str) -> None:
    """Convert VALUE to camel, kebab, or snake case."""
    app.emit(app.text.convert_case(value, style))


@text.command(examples='  dashkit text trim "  hello  "')
@click.argument("value")
@click.option("--chars", default=None, help="Characters to strip (default: whitespace).")
@click.pass_obj
def trim(app: AppContext, value: str, chars: str | None) -> None:
    """Strip characters from both ends of VALUE."""
    app.emit(app.text.trim(value, chars))


@text.command(examples='  dashkit text truncate "Hello world" --length 8 --omission "!!!"')
@click.argument("value")
@click.option(
    "--length", type=int, default=None, help="Maximum length ([strings] truncate_length)."
)
@click.option("--omission", default=None, help="Suffix marking the cut ([strings] omission).")
@click.pass_obj
def truncate(app: AppContext, value: str, length: int | None, omission: str | None) -> None:
    """Shorten VALUE, ending with an omission marker."""
    app.emit(app.text.truncate(value, length, omission))


@text.command(examples="  dashkit text pad 42 --length 5 --char 0")
@click.argument("value")
@click.option("--length", type=int, required=True, help="Target length.")
@click.option("--char", default=None, help="Pad character ([strings] pad_char).")
@click.option(
    "--side",
    type=click.Choice(["start", "end"]),
    default="start",
    help="Which end to pad.",
)
@click.pass_obj
def pad(app: AppContext, value: str, length: int, char: str | None, side: str) -> None:
    """Pad VALUE to --length."""
    app.emit(app.text.pad(value, length, char=char, side=side))  # type: ignore[arg-type]
