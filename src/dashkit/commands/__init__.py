"""Subcommand modules for dashkit.

Provides register_commands() which uses deferred imports to keep
``dashkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    2 groups (have subcommands) + 1 standalone command.
    """
    # --- Groups ---
    from dashkit.commands.doc import doc
    from dashkit.commands.text import text

    cli.add_command(doc)
    cli.add_command(text)

    # --- Standalone commands ---
    from dashkit.commands.range_cmd import range_cmd

    cli.add_command(range_cmd)
