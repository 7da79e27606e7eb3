"""Sequence helpers: chunking, filtering, set-like operations, slicing.

All functions accept lists or tuples and return new lists.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from dashkit.domain.deep import flatten_deep

__all__ = [
    "chunk",
    "compact",
    "concat",
    "difference",
    "difference_by",
    "drop",
    "drop_right",
    "flatten_deep",
    "take",
    "take_right",
    "uniq",
    "uniq_by",
]


class _SeenKeys:
    """Membership tracker that tolerates unhashable keys.

    Hashable keys go through a set; the rest fall back to equality scans.
    """

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        self._hashed: set[Any] = set()
        self._scanned: list[Any] = []
        for key in initial:
            self.add(key)

    def add(self, key: Any) -> None:
        try:
            self._hashed.add(key)
        except TypeError:
            self._scanned.append(key)

    def __contains__(self, key: Any) -> bool:
        try:
            if key in self._hashed:
                return True
        except TypeError:
            pass
        return key in self._scanned


def chunk(items: Sequence[Any], size: int) -> list[list[Any]]:
    """Split *items* into lists of *size*; the last one may be shorter.

    Raises:
        ValueError: If *size* is not positive.

    Examples:
        >>> chunk([1, 2, 3, 4], 3)
        [[1, 2, 3], [4]]
        >>> chunk([], 5)
        []
    """
    if size <= 0:
        msg = f"Chunk size must be positive, got {size}"
        raise ValueError(msg)
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def _is_falsy(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return isinstance(value, str) and value == ""


def compact(items: Iterable[Any]) -> list[Any]:
    """Drop ``None``, ``False``, numeric zero, and empty strings.

    Empty containers are kept.
    """
    return [item for item in items if not _is_falsy(item)]


def concat(*items: Any) -> list[Any]:
    """Join arguments into one list, splatting list and tuple arguments one level.

    Examples:
        >>> concat([1], 2, [3, [4]], (5,))
        [1, 2, 3, [4], 5]
    """
    result: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(item)
        else:
            result.append(item)
    return result


def difference(base: Iterable[Any], *excludes: Iterable[Any]) -> list[Any]:
    """Items of *base* not present in any of *excludes*.

    Base order and duplicates are preserved.
    """
    excluded = _SeenKeys(item for exclude in excludes for item in exclude)
    return [item for item in base if item not in excluded]


def difference_by(
    base: Iterable[Any],
    *excludes: Iterable[Any],
    iteratee: Callable[[Any], Any],
) -> list[Any]:
    """Like :func:`difference`, comparing ``iteratee(item)`` instead of items.

    Examples:
        >>> import math
        >>> difference_by([2.1, 1.2, 3.3], [4.4, 2.5], iteratee=math.floor)
        [1.2, 3.3]
    """
    excluded = _SeenKeys(iteratee(item) for exclude in excludes for item in exclude)
    return [item for item in base if iteratee(item) not in excluded]


def uniq(items: Iterable[Any]) -> list[Any]:
    """Distinct items, first occurrence wins."""
    return uniq_by(items, lambda item: item)


def uniq_by(items: Iterable[Any], iteratee: Callable[[Any], Any]) -> list[Any]:
    """Distinct items by ``iteratee(item)``, first occurrence wins."""
    seen = _SeenKeys()
    result: list[Any] = []
    for item in items:
        key = iteratee(item)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def drop(items: Sequence[Any], n: int = 1) -> list[Any]:
    """All but the first *n* items."""
    return list(items[max(n, 0) :])


def drop_right(items: Sequence[Any], n: int = 1) -> list[Any]:
    """All but the last *n* items."""
    return list(items[: max(len(items) - max(n, 0), 0)])


def take(items: Sequence[Any], n: int = 1) -> list[Any]:
    """The first *n* items."""
    return list(items[: max(n, 0)])


def take_right(items: Sequence[Any], n: int = 1) -> list[Any]:
    """The last *n* items."""
    if n <= 0:
        return []
    return list(items[-n:])
