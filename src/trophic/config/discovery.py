"""Locate and read ``trophic.toml``.

The file is found via ``TROPHIC_CONFIG`` or by walking up from the working
directory. A relative ``[wiring] catalog`` is anchored at the directory of
the config file that names it, so ``trophic run`` resolves against the same
catalog from any subdirectory.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from trophic.config.models import TrophicConfig

CONFIG_FILENAME = "trophic.toml"
CONFIG_ENV_VAR = "TROPHIC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    An explicit ``TROPHIC_CONFIG`` wins, even when it names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* into raw section data with the catalog path anchored.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    wiring = data.get("wiring")
    if isinstance(wiring, dict) and isinstance(wiring.get("catalog"), str):
        catalog = Path(wiring["catalog"]).expanduser()
        if not catalog.is_absolute():
            wiring["catalog"] = str(path.parent / catalog)
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> TrophicConfig:
    """Validate the config at *path*, or the one discovered from *cwd*.

    Returns the code defaults when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return TrophicConfig()
    return TrophicConfig.model_validate(read_config(path))
