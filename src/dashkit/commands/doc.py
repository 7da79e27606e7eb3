"""Command group: path queries and transforms over JSON/YAML documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dashkit.commands._base import DashGroup
from dashkit.config.models import DocumentFormat

if TYPE_CHECKING:
    from dashkit.commands._context import AppContext

_DOC_EXAMPLES = """\
  dashkit doc get config.json "servers[0].host"
  dashkit doc has config.yaml "features['beta.search']"
  cat data.json | dashkit doc keys - --path users[0]
  dashkit doc flatten data.json --path matrix
  dashkit --json doc invert labels.json --group"""

_source = click.argument("source")
_path_option = click.option(
    "--path", "path", default=None, help="Operate on the value at this path instead of the root."
)
_format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice([f.value for f in DocumentFormat]),
    default=None,
    help="Input format (default: from file suffix, then [documents] config).",
)


def _fmt(value: str | None) -> DocumentFormat | None:
    return DocumentFormat(value) if value else None


@click.group(cls=DashGroup, examples=_DOC_EXAMPLES)
@click.pass_obj
def doc(app: AppContext) -> None:
    """Query and reshape JSON/YAML documents. Use - to read stdin."""


@doc.command(
    examples="""\
  dashkit doc get config.json user.name
  dashkit doc get config.json "tags[1]" --default none
  dashkit -q doc get config.yaml "a.b[0]['c']" --default 0"""
)
@_source
@click.argument("path")
@click.option("--default", "default", default=None, help="Value printed when the path is missing.")
@_format_option
@click.pass_obj
def get(app: AppContext, source: str, path: str, default: str | None, fmt: str | None) -> None:
    """Print the value at PATH (or --default when it is missing or null)."""
    app.emit(app.documents.get(source, path, default=default, fmt=_fmt(fmt)))


@doc.command(
    examples="""\
  dashkit doc has config.json user.email
  dashkit -q doc has config.json "tags[3]" --format json"""
)
@_source
@click.argument("path")
@_format_option
@click.pass_obj
def has(app: AppContext, source: str, path: str, fmt: str | None) -> None:
    """Report whether PATH exists (a null value still counts)."""
    app.emit(app.documents.has(source, path, fmt=_fmt(fmt)))


@doc.command(examples="  dashkit doc pick user.json name email --path profile")
@_source
@click.argument("keys", nargs=-1, required=True)
@_path_option
@_format_option
@click.pass_obj
def pick(
    app: AppContext,
    source: str,
    keys: tuple[str, ...],
    path: str | None,
    fmt: str | None,
) -> None:
    """Keep only KEYS of a mapping."""
    app.emit(app.documents.pick(source, keys, path=path, fmt=_fmt(fmt)))


@doc.command(examples="  dashkit doc omit user.json password token")
@_source
@click.argument("keys", nargs=-1, required=True)
@_path_option
@_format_option
@click.pass_obj
def omit(
    app: AppContext,
    source: str,
    keys: tuple[str, ...],
    path: str | None,
    fmt: str | None,
) -> None:
    """Drop KEYS from a mapping."""
    app.emit(app.documents.omit(source, keys, path=path, fmt=_fmt(fmt)))


@doc.command(examples="  dashkit doc keys config.yaml --path services")
@_source
@_path_option
@_format_option
@click.pass_obj
def keys(app: AppContext, source: str, path: str | None, fmt: str | None) -> None:
    """List the keys of a mapping."""
    app.emit(app.documents.keys(source, path=path, fmt=_fmt(fmt)))


@doc.command(
    examples="""\
  dashkit doc invert codes.json
  dashkit doc invert labels.json --group"""
)
@_source
@_path_option
@click.option("--group", is_flag=True, help="Collect every key sharing a value.")
@_format_option
@click.pass_obj
def invert(app: AppContext, source: str, path: str | None, group: bool, fmt: str | None) -> None:
    """Swap the keys and values of a mapping."""
    app.emit(app.documents.invert(source, path=path, group=group, fmt=_fmt(fmt)))


@doc.command(examples="  dashkit doc flatten data.json --path matrix")
@_source
@_path_option
@_format_option
@click.pass_obj
def flatten(app: AppContext, source: str, path: str | None, fmt: str | None) -> None:
    """Flatten nested lists, dropping nulls."""
    app.emit(app.documents.flatten(source, path=path, fmt=_fmt(fmt)))


@doc.command(examples="  dashkit doc chunk ids.json --size 100")
@_source
@click.option("--size", required=True, type=int, help="Items per chunk (must be positive).")
@_path_option
@_format_option
@click.pass_obj
def chunk(app: AppContext, source: str, size: int, path: str | None, fmt: str | None) -> None:
    """Split a list into chunks of --size."""
    app.emit(app.documents.chunk(source, size, path=path, fmt=_fmt(fmt)))


@doc.command(examples="  dashkit doc compact rows.json --path values")
@_source
@_path_option
@_format_option
@click.pass_obj
def compact(app: AppContext, source: str, path: str | None, fmt: str | None) -> None:
    """Remove null, false, zero, and empty-string items from a list."""
    app.emit(app.documents.compact(source, path=path, fmt=_fmt(fmt)))


@doc.command(
    examples="""\
  dashkit doc uniq tags.json
  dashkit doc uniq users.json --by address.city"""
)
@_source
@_path_option
@click.option("--by", default=None, help="Compare items by the value at this path.")
@_format_option
@click.pass_obj
def uniq(app: AppContext, source: str, path: str | None, by: str | None, fmt: str | None) -> None:
    """Remove duplicate items from a list, keeping the first."""
    app.emit(app.documents.uniq(source, path=path, by=by, fmt=_fmt(fmt)))
