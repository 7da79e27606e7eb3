"""Click base classes adding an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints worked invocations for the
command or group and exits.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.examples)  # type: ignore[attr-defined]
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and registers the eager flag when they exist."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples.",
                )
            )


class DashCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=`` in its decorator."""


class DashGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its subcommands are DashCommands by default."""

    command_class = DashCommand
