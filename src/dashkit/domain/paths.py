"""Path parsing for deep property access.

Turns ``a.b[0]['c']``-style strings into ordered segment keys.

INVARIANT: Parsing never fails. Characters that do not belong to any
token are skipped, so ``"a..b"`` and ``"a[b]"`` both yield ``["a", "b"]``.
"""

from __future__ import annotations

import re

# Alternatives are tried in order at each position:
#   1. bare run   2. [123]   3. ['key']   4. ["key"]
PATH_TOKEN = re.compile(r"""[^.\[\]]+|\[(\d+)\]|\['([^']+)'\]|\["([^"]+)"\]""")


def parse_path(path: str) -> list[str]:
    """Split *path* into segment keys.

    Brackets and quotes are stripped; every recognized token contributes
    exactly one segment.

    Examples:
        >>> parse_path("a.b[0]['c']")
        ['a', 'b', '0', 'c']
        >>> parse_path('user["first.name"]')
        ['user', 'first.name']
        >>> parse_path("a..b")
        ['a', 'b']
        >>> parse_path("")
        []
    """
    segments: list[str] = []
    for match in PATH_TOKEN.finditer(path):
        index, single, double = match.groups()
        if index is not None:
            segments.append(index)
        elif single is not None:
            segments.append(single)
        elif double is not None:
            segments.append(double)
        else:
            segments.append(match.group(0))
    return segments


def parse_index(segment: str) -> int | None:
    """Return *segment* as a non-negative list index, or None.

    Only plain ASCII decimal digits qualify; signs, whitespace, and
    non-ASCII digits are rejected.
    """
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None
