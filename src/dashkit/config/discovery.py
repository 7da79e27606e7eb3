"""Locating and reading ``dashkit.toml``.

The file is searched for in the start directory and each of its parents,
the way git looks for ``.git/``. ``DASHKIT_CONFIG`` names a file directly
and disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from dashkit.config.models import DashConfig

CONFIG_FILENAME = "dashkit.toml"
CONFIG_ENV_VAR = "DASHKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    When ``DASHKIT_CONFIG`` is set it wins outright; if it points at a
    missing file the result is None rather than a discovered file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> DashConfig:
    """Read and validate the TOML sections without the env/CLI layers.

    Falls back to :func:`find_config` from *cwd* when *path* is None, and to
    code defaults when no file is found.
    """
    path = path or find_config(cwd)
    if path is None:
        return DashConfig()
    with path.open("rb") as fh:
        return DashConfig.model_validate(tomllib.load(fh))
