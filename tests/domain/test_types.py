"""Tests for emptiness and null predicates."""

from __future__ import annotations

from typing import Any

import pytest

from dashkit.domain.types import is_empty, is_not_empty, is_not_null, is_null


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, "", [], (), set(), frozenset(), {}])
    def test_empty(self, value: Any) -> None:
        assert is_empty(value)
        assert not is_not_empty(value)

    @pytest.mark.parametrize("value", ["a", [0], {"k": None}, (None,), {1}])
    def test_not_empty(self, value: Any) -> None:
        assert not is_empty(value)
        assert is_not_empty(value)

    @pytest.mark.parametrize("value", [0, False, 0.0, object()])
    def test_other_values_not_empty(self, value: Any) -> None:
        assert not is_empty(value)


class TestNull:
    def test_none(self) -> None:
        assert is_null(None)
        assert not is_not_null(None)

    @pytest.mark.parametrize("value", [0, "", False, []])
    def test_falsy_is_not_null(self, value: Any) -> None:
        assert not is_null(value)
        assert is_not_null(value)
