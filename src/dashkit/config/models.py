"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dashkit.toml only contains overrides.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class DocumentFormat(StrEnum):
    """Serialization formats understood by the document loader."""

    JSON = "json"
    YAML = "yaml"


class StringsConfig(BaseModel):
    """[strings] section: defaults for the text commands."""

    model_config = {"frozen": True}

    truncate_length: int = Field(default=30, ge=0)
    omission: str = "..."
    pad_char: str = " "
    trim_chars: str | None = None

    @field_validator("pad_char")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"pad_char must be a single character, got {value!r}"
            raise ValueError(msg)
        return value


class OutputConfig(BaseModel):
    """[output] section: how values are serialized for display."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)
    sort_keys: bool = False


class DocumentsConfig(BaseModel):
    """[documents] section."""

    model_config = {"frozen": True}

    default_format: DocumentFormat = DocumentFormat.JSON


class DashConfig(BaseModel):
    """Root config model: all TOML sections."""

    model_config = {"frozen": True}

    strings: StringsConfig = Field(default_factory=StringsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)
