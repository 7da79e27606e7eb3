"""Property-based tests for the domain helpers."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dashkit.domain.deep import clone_deep, flatten_deep
from dashkit.domain.lists import chunk, difference, uniq
from dashkit.domain.objects import get, has
from dashkit.domain.paths import parse_path
from dashkit.domain.strings import WHITESPACE, trim, truncate

pytestmark = [pytest.mark.property]

_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=5)
_trees = st.recursive(
    _scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=4), children, max_size=4),
    max_leaves=20,
)
_keys = st.text(alphabet="abcxyz_", min_size=1, max_size=6)


class TestParsePathProperties:
    @given(st.text(max_size=30))
    def test_never_raises_and_yields_nonempty_segments(self, path: str) -> None:
        assert all(segment for segment in parse_path(path))

    @given(st.lists(_keys, min_size=1, max_size=5))
    def test_dotted_keys_round_trip(self, parts: list[str]) -> None:
        assert parse_path(".".join(parts)) == parts


class TestGetHasProperties:
    @given(st.dictionaries(_keys, _scalars, min_size=1, max_size=5))
    def test_top_level_keys(self, data: dict[str, Any]) -> None:
        for key, value in data.items():
            assert has(data, key)
            assert get(data, key, "d") == ("d" if value is None else value)

    @given(_trees, st.text(max_size=12))
    def test_get_defaults_whenever_has_is_false(self, tree: Any, path: str) -> None:
        marker = object()
        if not has(tree, path):
            assert get(tree, path, marker) is marker


class TestCloneDeepProperties:
    @given(_trees)
    def test_clone_equals_original(self, tree: Any) -> None:
        assert clone_deep(tree) == tree

    @given(st.lists(st.lists(st.integers(), max_size=3), min_size=1, max_size=4))
    def test_mutating_clone_leaves_original(self, tree: list[list[int]]) -> None:
        snapshot = [list(inner) for inner in tree]
        copy = clone_deep(tree)
        for inner in copy:
            inner.append(0)
        assert tree == snapshot


class TestFlattenDeepProperties:
    @given(st.lists(_trees, max_size=5))
    def test_no_lists_or_none_remain(self, tree: list[Any]) -> None:
        flat = flatten_deep(tree)
        assert all(item is not None and not isinstance(item, list) for item in flat)

    @given(st.lists(_trees, max_size=5))
    def test_idempotent(self, tree: list[Any]) -> None:
        flat = flatten_deep(tree)
        assert flatten_deep(flat) == flat


class TestListProperties:
    @given(st.lists(st.integers(), max_size=20), st.integers(min_value=1, max_value=6))
    def test_chunk_concatenation_restores_input(self, items: list[int], size: int) -> None:
        chunks = chunk(items, size)
        assert [item for part in chunks for item in part] == items
        assert all(len(part) == size for part in chunks[:-1])

    @given(st.lists(st.integers(max_value=9), max_size=15), st.lists(st.integers(max_value=9)))
    def test_difference_membership(self, base: list[int], exclude: list[int]) -> None:
        result = difference(base, exclude)
        assert all(item not in exclude for item in result)
        assert [item for item in base if item not in exclude] == result

    @given(st.lists(st.integers(min_value=0, max_value=5), max_size=20))
    def test_uniq_is_ordered_set(self, items: list[int]) -> None:
        result = uniq(items)
        assert len(result) == len(set(items))
        assert result == sorted(set(items), key=items.index)


class TestStringProperties:
    @given(st.text(max_size=40), st.integers(min_value=3, max_value=40))
    def test_truncate_respects_length(self, text: str, length: int) -> None:
        assert len(truncate(text, length)) <= max(length, 3)

    @given(st.text(max_size=20))
    def test_trim_idempotent(self, text: str) -> None:
        once = trim(text)
        assert trim(once) == once
        assert not once or (once[0] not in WHITESPACE and once[-1] not in WHITESPACE)
