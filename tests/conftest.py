"""Shared pytest fixtures and test helpers for dashkit tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from dashkit.config.settings import DashSettings
from dashkit.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dash = logging.getLogger("dashkit")
    dash_level = dash.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dash.setLevel(dash_level)
    disable_telemetry()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no dashkit.toml or env leaks in.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.delenv("DASHKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DashSettings:
    """Default settings with no TOML file in reach."""
    monkeypatch.delenv("DASHKIT_CONFIG", raising=False)
    return DashSettings.from_cli(start=tmp_path)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., str]:
    """Write a value tree to a JSON file under tmp_path and return its path."""

    def _write(data: Any, name: str = "doc.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


SAMPLE_DOC: dict[str, Any] = {
    "user": {"name": "Ada", "age": 36, "email": None},
    "tags": ["math", "engines", "math"],
    "matrix": [[1, [2, 3]], [None, 4]],
    "labels": {"x": "status", "y": "status", "z": "type"},
    "a": {"b": [{"c": 42}]},
}


@pytest.fixture
def sample_doc(write_json: Callable[..., str]) -> str:
    """Path to a JSON file holding SAMPLE_DOC."""
    return write_json(SAMPLE_DOC)
