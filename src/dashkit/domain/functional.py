"""Iteration helpers: repeated calls and integer ranges."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

_T = TypeVar("_T")


def times(n: int, iteratee: Callable[[int], _T]) -> list[_T]:
    """Call ``iteratee(i)`` for ``i`` in ``0..n-1`` and collect the results.

    Raises:
        ValueError: If *n* is negative.

    Examples:
        >>> times(3, lambda i: i * 2)
        [0, 2, 4]
    """
    if n < 0:
        msg = f"n must be non-negative, got {n}"
        raise ValueError(msg)
    return [iteratee(i) for i in range(n)]


def range_(start: int, end: int | None = None, step: int = 1) -> list[int]:
    """Integers from *start* up to, but not including, *end*.

    With a single argument, counts from 0 to *start*. A negative *step*
    counts down toward *end*.

    Raises:
        ValueError: If *step* is zero.

    Examples:
        >>> range_(4)
        [0, 1, 2, 3]
        >>> range_(0, 6, 2)
        [0, 2, 4]
        >>> range_(5, 0, -2)
        [5, 3, 1]
    """
    if step == 0:
        msg = "Step must not be zero"
        raise ValueError(msg)
    if end is None:
        start, end = 0, start
    return list(range(start, end, step))
