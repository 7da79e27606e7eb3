"""DashSettings: CLI flags, environment and ``dashkit.toml`` merged into one object.

Sources, highest priority first:

1. keyword arguments (the CLI flags Click parsed)
2. ``DASHKIT_*`` environment variables, ``__`` separating nested keys
   (``DASHKIT_STRINGS__OMISSION=~``)
3. the TOML file picked by :meth:`DashSettings.from_cli`
4. defaults baked into :mod:`dashkit.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from dashkit.config.discovery import find_config
from dashkit.config.models import DocumentsConfig, OutputConfig, StringsConfig

# TOML file for the settings object currently being constructed.
_toml_file: ContextVar[Path | None] = ContextVar("dashkit_toml_file", default=None)


class DashSettings(BaseSettings):
    """Resolved settings for one CLI invocation.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="DASHKIT_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    strings: StringsConfig = Field(default_factory=StringsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DashSettings:
        """Build settings for a CLI run.

        An explicit *config_path* is used when it names a file; a path that
        does not exist means no TOML at all. Without one, ``dashkit.toml``
        is discovered by walking up from *start* (default: cwd).

        Raises:
            click.ClickException: If the TOML file is not valid TOML, or a
                value from TOML or the environment fails validation.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        except ValidationError as exc:
            msg = f"Invalid settings:\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
