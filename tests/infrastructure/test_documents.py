"""Tests for JSON/YAML document loading."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from dashkit.config.models import DocumentFormat
from dashkit.infrastructure.documents import (
    STDIN_SOURCE,
    DocumentError,
    detect_format,
    load_document,
    parse_document,
)


class TestDetectFormat:
    @pytest.mark.parametrize(
        "source,expected",
        [
            ("data.json", DocumentFormat.JSON),
            ("data.yaml", DocumentFormat.YAML),
            ("data.yml", DocumentFormat.YAML),
            ("DATA.YML", DocumentFormat.YAML),
        ],
    )
    def test_by_suffix(self, source: str, expected: DocumentFormat) -> None:
        assert detect_format(source) is expected

    def test_unknown_suffix_uses_default(self) -> None:
        assert detect_format("data.txt", DocumentFormat.YAML) is DocumentFormat.YAML
        assert detect_format("data") is DocumentFormat.JSON

    def test_stdin_uses_default(self) -> None:
        assert detect_format(STDIN_SOURCE, DocumentFormat.YAML) is DocumentFormat.YAML


class TestParseDocument:
    def test_json(self) -> None:
        assert parse_document('{"a": [1, null]}', DocumentFormat.JSON) == {"a": [1, None]}

    def test_yaml(self) -> None:
        text = "user:\n  name: Ada\n  tags: [a, b]\n  email: null\n"
        assert parse_document(text, DocumentFormat.YAML) == {
            "user": {"name": "Ada", "tags": ["a", "b"], "email": None},
        }

    def test_yaml_returns_plain_containers(self) -> None:
        result = parse_document("a:\n  - 1\n", DocumentFormat.YAML)
        assert type(result) is dict
        assert type(result["a"]) is list

    def test_empty_yaml_is_none(self) -> None:
        assert parse_document("", DocumentFormat.YAML) is None

    def test_invalid_json(self) -> None:
        with pytest.raises(DocumentError, match="Invalid JSON"):
            parse_document("{nope", DocumentFormat.JSON)

    def test_invalid_yaml(self) -> None:
        with pytest.raises(DocumentError, match="Invalid YAML"):
            parse_document("a: [1, 2\n", DocumentFormat.YAML)


class TestLoadDocument:
    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        path.write_text('{"k": 1}', encoding="utf-8")
        assert load_document(str(path)) == {"k": 1}

    def test_yaml_file_by_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.yaml"
        path.write_text("k: 1\n", encoding="utf-8")
        assert load_document(str(path)) == {"k": 1}

    def test_explicit_format_overrides_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.txt"
        path.write_text("k: 1\n", encoding="utf-8")
        assert load_document(str(path), DocumentFormat.YAML) == {"k": 1}

    def test_default_format(self, tmp_path: Path) -> None:
        path = tmp_path / "doc"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        assert load_document(str(path), default_format=DocumentFormat.YAML) == [1, 2]

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2, 3]"))
        assert load_document(STDIN_SOURCE) == [1, 2, 3]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentError, match="Cannot read"):
            load_document(str(tmp_path / "missing.json"))

    def test_undecodable_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe{}"), encoding="utf-8")
        )
        with pytest.raises(DocumentError, match="Cannot read stdin"):
            load_document(STDIN_SOURCE)
