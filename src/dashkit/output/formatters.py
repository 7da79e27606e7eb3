"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (``OK: op`` header plus the
value) or machines (--json). ``--quiet`` prints only the bare value so
results can be piped into other tools.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

if TYPE_CHECKING:
    from dashkit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering switches resolved from global CLI flags and [output] config."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 2
    sort_keys: bool = False


def _jsonable(value: Any) -> Any:
    """Plain JSON data: mapping keys become strings, unknown leaves ``str``."""
    return to_jsonable_python(value, fallback=str)


def render_value(value: Any, *, indent: int | None = 2, sort_keys: bool = False) -> str:
    """Render a value tree for display.

    Strings are printed raw; everything else as JSON. YAML dates become
    ISO strings, including when they are mapping keys, and non-string keys
    are stringified so ``sort_keys`` never compares mixed types.
    """
    if isinstance(value, str):
        return value
    return _json.dumps(
        _jsonable(value),
        indent=indent or None,
        sort_keys=sort_keys,
        ensure_ascii=False,
    )


def _format_data_human(data: dict[str, Any]) -> str:
    """Format auxiliary result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if key == "value":
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(_jsonable(value), separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Rendering switches; defaults to human-readable output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps(
            _jsonable(result.model_dump(exclude_none=not settings.verbose)),
            indent=settings.indent or None,
            sort_keys=settings.sort_keys,
            ensure_ascii=False,
        )
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"

    value = render_value(
        result.value,
        indent=settings.indent,
        sort_keys=settings.sort_keys,
    )
    if settings.quiet:
        return value
    parts = [f"OK: {result.op}", value]
    if settings.verbose:
        extra = _format_data_human(result.data)
        if extra:
            parts.append(extra)
        if result.meta:
            parts.append(f"  meta: {_json.dumps(_jsonable(result.meta))}")
    return "\n".join(parts)
