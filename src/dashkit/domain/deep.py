"""Recursive traversal over nested containers.

Handles lists, tuples, mappings, and sets. Every other value is treated
as an immutable leaf and passed through unchanged.

Cyclic structures are not supported: recursion will exceed the
interpreter's limit and raise ``RecursionError``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def clone_deep(value: Any) -> Any:
    """Return a structural copy of *value* sharing no mutable containers.

    Each container is rebuilt as the same kind (mappings become ``dict``).
    Mapping keys are reused as-is; only values are cloned.

    Examples:
        >>> original = {"tags": ["a"], "nested": {"x": 1}}
        >>> copy = clone_deep(original)
        >>> copy["tags"].append("b")
        >>> original["tags"]
        ['a']
    """
    if isinstance(value, list):
        return [clone_deep(item) for item in value]
    if isinstance(value, tuple):
        return tuple(clone_deep(item) for item in value)
    if isinstance(value, Mapping):
        return {key: clone_deep(item) for key, item in value.items()}
    if isinstance(value, frozenset):
        return frozenset(clone_deep(item) for item in value)
    if isinstance(value, set):
        return {clone_deep(item) for item in value}
    return value


def flatten_deep(items: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples into one list, depth-first.

    ``None`` elements are dropped at every depth. Mappings, strings, and
    other leaves are appended unchanged.

    Examples:
        >>> flatten_deep([1, [2, [3, 4], 5], 6])
        [1, 2, 3, 4, 5, 6]
        >>> flatten_deep([1, None, [None, 2]])
        [1, 2]
    """
    flat: list[Any] = []
    _collect(items, flat)
    return flat


def _collect(items: Iterable[Any], out: list[Any]) -> None:
    for item in items:
        if isinstance(item, (list, tuple)):
            _collect(item, out)
        elif item is not None:
            out.append(item)
