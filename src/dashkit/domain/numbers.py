"""Number helpers: clamping, range checks, random integers."""

from __future__ import annotations

from random import randint
from typing import TypeVar

_N = TypeVar("_N", int, float)


def _check_bounds(lower: float, upper: float) -> None:
    if lower > upper:
        msg = f"Lower bound {lower} must not exceed upper bound {upper}"
        raise ValueError(msg)


def clamp(number: _N, lower: _N, upper: _N) -> _N:
    """Clamp *number* into ``[lower, upper]``.

    Raises:
        ValueError: If *lower* is greater than *upper*.
    """
    _check_bounds(lower, upper)
    if number < lower:
        return lower
    if number > upper:
        return upper
    return number


def in_range(number: float, start: float, end: float) -> bool:
    """Whether *number* lies in the half-open interval between *start* and *end*.

    Bounds are swapped when *start* is greater than *end*.
    """
    lower, upper = (start, end) if start <= end else (end, start)
    return lower <= number < upper


def random(lower: int = 0, upper: int = 1) -> int:
    """Uniform random integer in ``[lower, upper]``, both ends inclusive."""
    _check_bounds(lower, upper)
    return randint(lower, upper)
