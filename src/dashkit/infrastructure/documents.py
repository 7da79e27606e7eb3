"""Document loading for the CLI: JSON and YAML into value trees.

Pure value-tree helpers live in :mod:`dashkit.domain`
(dependency direction: infrastructure -> domain). This module handles
the actual file/stdin I/O and parsing.
"""

from __future__ import annotations

import json
import sys
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from dashkit.config.models import DocumentFormat

STDIN_SOURCE = "-"

_SUFFIX_FORMATS: dict[str, DocumentFormat] = {
    ".json": DocumentFormat.JSON,
    ".yaml": DocumentFormat.YAML,
    ".yml": DocumentFormat.YAML,
}


class DocumentError(Exception):
    """A document could not be read or parsed."""


def detect_format(source: str, default: DocumentFormat = DocumentFormat.JSON) -> DocumentFormat:
    """Pick a format from the file suffix of *source*, else *default*."""
    if source == STDIN_SOURCE:
        return default
    return _SUFFIX_FORMATS.get(Path(source).suffix.lower(), default)


def parse_document(text: str, fmt: DocumentFormat) -> Any:
    """Parse *text* as *fmt* into plain dicts, lists, and scalars.

    Raises:
        DocumentError: If the text is not valid for the format.
    """
    if fmt is DocumentFormat.YAML:
        try:
            return YAML(typ="safe").load(StringIO(text))
        except YAMLError as exc:
            msg = f"Invalid YAML: {exc}"
            raise DocumentError(msg) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise DocumentError(msg) from exc


def load_document(
    source: str,
    fmt: DocumentFormat | None = None,
    *,
    default_format: DocumentFormat = DocumentFormat.JSON,
) -> Any:
    """Read and parse *source* (a file path, or ``"-"`` for stdin).

    Raises:
        DocumentError: If the source cannot be read or parsed.
    """
    resolved = fmt or detect_format(source, default_format)
    try:
        if source == STDIN_SOURCE:
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        label = "stdin" if source == STDIN_SOURCE else source
        msg = f"Cannot read {label}: {exc}"
        raise DocumentError(msg) from exc
    return parse_document(text, resolved)
