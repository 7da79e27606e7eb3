"""Emptiness and null checks over value trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def is_empty(value: Any) -> bool:
    """True for ``None`` and for empty strings, sequences, sets, and mappings.

    Numbers and booleans are never empty, ``0`` and ``False`` included.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, set, frozenset, Mapping)):
        return len(value) == 0
    return False


def is_not_empty(value: Any) -> bool:
    return not is_empty(value)


def is_null(value: Any) -> bool:
    return value is None


def is_not_null(value: Any) -> bool:
    return value is not None
