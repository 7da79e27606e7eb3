"""Object helpers: path-based access and mapping transforms.

``get`` and ``has`` walk the same path but disagree on one point:
a key that is present with a ``None`` value counts as present for
``has`` while ``get`` substitutes the default.

INVARIANT: No function here mutates its input. Absence is reported
through the return value, never by raising.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from dashkit.domain.paths import parse_index, parse_path

_MISSING = object()


def _resolve(obj: Any, path: str) -> Any:
    """Walk *path* through *obj*; return the value or ``_MISSING``."""
    current = obj
    for segment in parse_path(path):
        if isinstance(current, Mapping):
            if segment not in current:
                return _MISSING
            current = current[segment]
        elif isinstance(current, (list, tuple)):
            index = parse_index(segment)
            if index is None or index >= len(current):
                return _MISSING
            current = current[index]
        else:
            return _MISSING
    return current


def get(obj: Any, path: str, default: Any = None) -> Any:
    """Resolve *path* against *obj*, falling back to *default*.

    Mapping segments are looked up as string keys; list and tuple segments
    must be in-bounds non-negative integers. A miss at any step, or a
    resolved ``None``, returns *default*.

    Examples:
        >>> get({"a": {"b": [{"c": 42}]}}, "a.b[0].c")
        42
        >>> get({}, "x.y", "fallback")
        'fallback'
    """
    if obj is None or not path:
        return default
    value = _resolve(obj, path)
    if value is _MISSING or value is None:
        return default
    return value


def has(obj: Any, path: str) -> bool:
    """Whether every segment of *path* resolves inside *obj*.

    Unlike :func:`get`, a resolved ``None`` still counts as present.
    """
    if obj is None or not path:
        return False
    return _resolve(obj, path) is not _MISSING


def pick(obj: Mapping[Any, Any], *keys: Any) -> dict[str, Any]:
    """New dict holding only *keys* that exist in *obj*."""
    return {str(key): obj[key] for key in keys if key in obj}


def pick_by(obj: Mapping[Any, Any], predicate: Callable[[Any, Any], bool]) -> dict[str, Any]:
    """New dict holding the entries for which ``predicate(key, value)`` is true."""
    return {str(key): value for key, value in obj.items() if predicate(key, value)}


def omit(obj: Mapping[Any, Any], *keys: Any) -> dict[str, Any]:
    """New dict without *keys*. Keys missing from *obj* are ignored."""
    excluded = set(keys)
    return {str(key): value for key, value in obj.items() if key not in excluded}


def omit_by(obj: Mapping[Any, Any], predicate: Callable[[Any, Any], bool]) -> dict[str, Any]:
    """New dict without the entries for which ``predicate(key, value)`` is true."""
    return {str(key): value for key, value in obj.items() if not predicate(key, value)}


def keys(obj: Any) -> list[Any]:
    """Keys of a mapping in insertion order; ``[]`` for anything else."""
    if not isinstance(obj, Mapping):
        return []
    return list(obj.keys())


def values(obj: Any) -> list[Any]:
    """Values of a mapping in insertion order; ``[]`` for anything else."""
    if not isinstance(obj, Mapping):
        return []
    return list(obj.values())


def entries(obj: Any) -> list[tuple[Any, Any]]:
    """``(key, value)`` pairs of a mapping; ``[]`` for anything else."""
    if not isinstance(obj, Mapping):
        return []
    return list(obj.items())


def map_values(obj: Mapping[Any, Any], transform: Callable[[Any, Any], Any]) -> dict[Any, Any]:
    """New dict with each value replaced by ``transform(key, value)``."""
    return {key: transform(key, value) for key, value in obj.items()}


def map_keys(obj: Mapping[Any, Any], transform: Callable[[Any, Any], Any]) -> dict[Any, Any]:
    """New dict with each key replaced by ``transform(key, value)``.

    When two keys map to the same new key, the later entry wins.
    """
    return {transform(key, value): value for key, value in obj.items()}


def invert(obj: Mapping[Any, Any]) -> dict[str, Any]:
    """Swap keys and values; values are stringified.

    Examples:
        >>> invert({"a": "x", "b": "x", "c": "y"})
        {'x': 'b', 'y': 'c'}
    """
    return {str(value): key for key, value in obj.items()}


def invert_by(obj: Mapping[Any, Any]) -> dict[str, list[Any]]:
    """Group keys by their stringified value, keeping insertion order.

    Examples:
        >>> invert_by({"x": "status", "y": "status", "z": "type"})
        {'status': ['x', 'y'], 'type': ['z']}
    """
    grouped: dict[str, list[Any]] = {}
    for key, value in obj.items():
        grouped.setdefault(str(value), []).append(key)
    return grouped

