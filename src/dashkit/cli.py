"""The ``dashkit`` entry point: global flags, settings, and subcommand registration."""

from __future__ import annotations

import click

from dashkit import __version__
from dashkit.commands import register_commands
from dashkit.commands._base import DashGroup
from dashkit.commands._context import AppContext
from dashkit.config.settings import DashSettings

_CLI_EXAMPLES = """\
  dashkit doc get config.json "servers[0].host"
  dashkit --json doc keys config.yaml
  dashkit -q text case "Hello World" --style snake
  dashkit -c ./ci.toml text truncate "a long commit subject line"
  DASHKIT_OUTPUT__SORT_KEYS=true dashkit doc pick user.json name email"""


@click.group(
    cls=DashGroup,
    invoke_without_command=True,
    examples=_CLI_EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="dashkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the bare value.")
@click.option("-v", "--verbose", is_flag=True, help="Extra result data, telemetry and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="TOML file to use instead of discovering dashkit.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Lodash-style helpers for JSON/YAML documents and strings."""
    settings = DashSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
